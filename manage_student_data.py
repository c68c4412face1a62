#!/usr/bin/env python3
"""
Student data management script.

Seeds subjects, records tasks, validates data files and prints the
learning recommendations the web API would return for a student.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.student_data import StudentDataError, StudentDataStore
from config_manager import get_paths_config, get_recommendation_config
from learning_service.models import TaskStatus
from learning_service.recommendations import build_default_engine

# Set up logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


class StudentDataManager:
    """Maintenance operations over the student data directory."""

    def __init__(self, data_dir: Path):
        self.store = StudentDataStore(data_dir)
        self.engine = build_default_engine(
            data_source=self.store, **get_recommendation_config().engine_kwargs()
        )

    def validate_all(self) -> Dict[str, Any]:
        """Check every student file loads into valid subjects and tasks."""
        results: List[Dict[str, Any]] = []
        for user_id in self.store.list_user_ids():
            try:
                subjects = self.store.get_subjects(user_id)
                tasks = self.store.get_tasks(user_id)
            except StudentDataError as e:
                logger.warning(f"Invalid data for {user_id}: {e}")
                results.append({"user_id": user_id, "valid": False, "error": str(e)})
                continue

            completed = [task for task in tasks if task.is_completed]
            results.append({
                "user_id": user_id,
                "valid": True,
                "subjects_count": len(subjects),
                "tasks_count": len(tasks),
                "completed_count": len(completed),
            })

        invalid = [r for r in results if not r["valid"]]
        logger.info(f"Validation complete: {len(invalid)}/{len(results)} files invalid")
        return {
            "total_files": len(results),
            "invalid_files": len(invalid),
            "results": results,
        }

    def recommend(self, user_id: str) -> List[Dict[str, Any]]:
        """Recommendations for one student, JSON-ready."""
        return [rec.to_dict() for rec in self.engine.generate_recommendations(user_id)]


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _print_recommendations(recommendations: List[Dict[str, Any]]) -> None:
    if not recommendations:
        print("No recommendations yet.")
        return
    for rec in recommendations:
        print(f"[{rec['priority']}] {rec['title']} ({rec['type']})")
        print(f"    {rec['reason']}")
        if rec.get("suggestedTask"):
            print(f"    Try: {rec['suggestedTask']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Student data management script")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Directory containing student data files")
    sub = parser.add_subparsers(dest="command", required=True)

    seed = sub.add_parser("seed-subjects", help="Add the default subjects to a student")
    seed.add_argument("uid")

    add_subject = sub.add_parser("add-subject", help="Add a subject to a student")
    add_subject.add_argument("uid")
    add_subject.add_argument("name")
    add_subject.add_argument("color", nargs="?", default="#64748B")

    add_task = sub.add_parser("add-task", help="Record a task for a student")
    add_task.add_argument("uid")
    add_task.add_argument("title")
    add_task.add_argument("--subject")
    add_task.add_argument("--category", default="brain")
    add_task.add_argument("--completed", action="store_true",
                          help="Record the task as already completed")

    complete = sub.add_parser("complete-task", help="Mark a task as completed")
    complete.add_argument("uid")
    complete.add_argument("task_id", type=int)

    recommend = sub.add_parser("recommend", help="Print recommendations for a student")
    recommend.add_argument("uid")
    recommend.add_argument("--json", action="store_true", help="Print raw JSON")

    sub.add_parser("validate", help="Validate every student data file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    data_dir = args.data_dir or Path(get_paths_config().student_data_dir)
    manager = StudentDataManager(data_dir)
    store = manager.store

    try:
        if args.command == "seed-subjects":
            added = store.seed_default_subjects(args.uid)
            print(f"Added {len(added)} subject(s): {', '.join(s.name for s in added) or '-'}")
        elif args.command == "add-subject":
            subject = store.add_subject(args.uid, args.name, args.color)
            print(f"Added subject {subject.name} ({subject.color})")
        elif args.command == "add-task":
            status = TaskStatus.COMPLETED if args.completed else TaskStatus.PENDING
            task = store.add_task(args.uid, args.title, subject=args.subject,
                                  category=args.category, status=status)
            print(f"Added task #{task.id}: {task.title} [{task.status.value}]")
        elif args.command == "complete-task":
            task = store.update_task_status(args.uid, args.task_id, TaskStatus.COMPLETED)
            print(f"Completed task #{task.id}: {task.title}")
        elif args.command == "recommend":
            recommendations = manager.recommend(args.uid)
            if args.json:
                _print_json(recommendations)
            else:
                _print_recommendations(recommendations)
        elif args.command == "validate":
            summary = manager.validate_all()
            _print_json(summary)
            return 1 if summary["invalid_files"] else 0
    except StudentDataError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
