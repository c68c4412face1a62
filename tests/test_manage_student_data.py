"""
Tests for the student data management CLI.
"""
import json

from manage_student_data import main


def _run(tmp_path, *args):
    return main(["--data-dir", str(tmp_path), *args])


class TestManageStudentData:

    def test_seed_and_recommend(self, tmp_path, capsys):
        assert _run(tmp_path, "seed-subjects", "alice") == 0
        capsys.readouterr()

        assert _run(tmp_path, "recommend", "alice", "--json") == 0
        recommendations = json.loads(capsys.readouterr().out)
        assert len(recommendations) == 7
        assert recommendations[0]["title"] == "Explore Mathematics"

    def test_task_workflow(self, tmp_path, capsys):
        _run(tmp_path, "add-subject", "bob", "Robotics", "#112233")
        for _ in range(3):
            _run(tmp_path, "add-task", "bob", "Build a rover", "--subject", "Robotics", "--completed")
        _run(tmp_path, "add-task", "bob", "Wire sensors", "--subject", "Robotics")
        assert _run(tmp_path, "complete-task", "bob", "4") == 0
        capsys.readouterr()

        _run(tmp_path, "recommend", "bob")
        out = capsys.readouterr().out
        assert "[7] Develop Your Robotics Skills (skill_development)" in out
        assert "Explore Robotics" not in out

    def test_recommend_with_no_data(self, tmp_path, capsys):
        assert _run(tmp_path, "recommend", "nobody") == 0
        assert "No recommendations yet." in capsys.readouterr().out

    def test_errors_return_nonzero(self, tmp_path):
        assert _run(tmp_path, "complete-task", "carol", "99") == 1
        assert _run(tmp_path, "add-subject", "bad/uid", "Art") == 1

    def test_validate_reports_invalid_files(self, tmp_path, capsys):
        _run(tmp_path, "seed-subjects", "alice")
        (tmp_path / "broken.json").write_text("[]", encoding="utf-8")
        capsys.readouterr()

        assert _run(tmp_path, "validate") == 1
        summary = json.loads(capsys.readouterr().out)
        assert summary["total_files"] == 2
        assert summary["invalid_files"] == 1

    def test_validate_reports_undecodable_file(self, tmp_path, capsys):
        _run(tmp_path, "seed-subjects", "alice")
        (tmp_path / "bob.json").write_bytes(b'{"subjects": [{"name": "\xff"}]}')
        capsys.readouterr()

        assert _run(tmp_path, "validate") == 1
        summary = json.loads(capsys.readouterr().out)
        results = {r["user_id"]: r for r in summary["results"]}
        assert results["alice"]["valid"] is True
        assert results["alice"]["completed_count"] == 0
        assert results["bob"]["valid"] is False
