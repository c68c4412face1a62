"""
Rule-based recommendation strategies.

Each strategy is a stateless rule over the completed tasks in a
RecommendationContext. Thresholds are constructor arguments so the web
application can tune them from configuration.
"""

from __future__ import annotations

import math
import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence

from ..models import LearningRecommendation, RecommendationType, Task
from .content import (
    get_challenge_recommendation_text,
    get_skill_recommendation_text,
    get_subject_recommendation_text,
    get_subject_resources,
)
from .engine import RecommendationContext


BALANCE_CATEGORIES: Mapping[str, Sequence[str]] = MappingProxyType({
    "knowledge": ("Mathematics", "Science", "History", "English"),
    "skills": ("Life Skills", "Physical Activity"),
    "interests": ("Interest / Passion",),
})

_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Subject exploration
# ---------------------------------------------------------------------------


class SubjectExplorationStrategy:
    """Suggests subjects the student has barely touched."""

    name = "subject_exploration"
    priority = 8

    def __init__(self, underexplored_threshold: int = 2):
        self.underexplored_threshold = underexplored_threshold

    def generate(self, context: RecommendationContext) -> List[LearningRecommendation]:
        counts = _count_by_subject(context.completed_tasks)

        recommendations: List[LearningRecommendation] = []
        seen = set()
        for subject in context.subjects:
            name = subject.name
            if name in seen:
                continue
            seen.add(name)
            if counts.get(name, 0) >= self.underexplored_threshold:
                continue

            text = get_subject_recommendation_text(name)
            recommendations.append(
                LearningRecommendation(
                    id=recommendation_id(RecommendationType.SUBJECT_EXPLORATION, name),
                    type=RecommendationType.SUBJECT_EXPLORATION,
                    title=f"Explore {name}",
                    description=text.description,
                    reason=text.reason,
                    suggested_task=text.suggested_task,
                    related_subject=name,
                    priority=self.priority,
                    resources=get_subject_resources(name),
                )
            )
        return recommendations


# ---------------------------------------------------------------------------
# Skill development
# ---------------------------------------------------------------------------


class SkillDevelopmentStrategy:
    """Pushes subjects the student keeps coming back to."""

    name = "skill_development"
    priority = 7

    def __init__(self, min_tasks: int = 3):
        self.min_tasks = min_tasks

    def generate(self, context: RecommendationContext) -> List[LearningRecommendation]:
        tasks_by_subject: Dict[str, List[Task]] = {}
        for task in context.completed_tasks:
            if task.subject:
                tasks_by_subject.setdefault(task.subject, []).append(task)

        recommendations: List[LearningRecommendation] = []
        for subject, tasks in tasks_by_subject.items():
            if len(tasks) < self.min_tasks:
                continue

            text = get_skill_recommendation_text(subject)
            recommendations.append(
                LearningRecommendation(
                    id=recommendation_id(RecommendationType.SKILL_DEVELOPMENT, subject),
                    type=RecommendationType.SKILL_DEVELOPMENT,
                    title=f"Develop Your {subject} Skills",
                    description=text.description,
                    reason=text.reason,
                    suggested_task=text.suggested_task,
                    related_subject=subject,
                    priority=self.priority,
                    resources=get_subject_resources(subject),
                )
            )
        return recommendations


# ---------------------------------------------------------------------------
# Balance
# ---------------------------------------------------------------------------


class BalanceStrategy:
    """Flags knowledge / skills / interests buckets that are under-represented."""

    name = "balance"

    def __init__(
        self,
        min_tasks: int = 5,
        knowledge_min_percent: float = 20,
        skills_min_percent: float = 20,
        interests_min_percent: float = 10,
    ):
        self.min_tasks = min_tasks
        self.knowledge_min_percent = knowledge_min_percent
        self.skills_min_percent = skills_min_percent
        self.interests_min_percent = interests_min_percent

    def generate(self, context: RecommendationContext) -> List[LearningRecommendation]:
        counts = category_counts(context.completed_tasks)
        total = sum(counts.values())
        if total == 0 or total < self.min_tasks:
            return []

        knowledge_percent = counts["knowledge"] / total * 100
        skills_percent = counts["skills"] / total * 100
        interests_percent = counts["interests"] / total * 100

        recommendations: List[LearningRecommendation] = []
        if knowledge_percent < self.knowledge_min_percent:
            recommendations.append(
                LearningRecommendation(
                    id="balance_knowledge",
                    type=RecommendationType.BALANCE,
                    title="Balance Your Learning: Knowledge Focus",
                    description=(
                        "You've been focusing on practical skills and interests, which is great! "
                        "Consider adding some academic subjects to round out your learning."
                    ),
                    reason=f"Only {round_half_up(knowledge_percent)}% of your completed tasks are in knowledge areas.",
                    suggested_task="Try a math puzzle, science experiment, or reading assignment.",
                    priority=6,
                )
            )

        if skills_percent < self.skills_min_percent:
            recommendations.append(
                LearningRecommendation(
                    id="balance_skills",
                    type=RecommendationType.BALANCE,
                    title="Balance Your Learning: Practical Skills",
                    description=(
                        "You've been doing well with academic subjects! "
                        "Consider adding some practical life skills to your learning."
                    ),
                    reason=f"Only {round_half_up(skills_percent)}% of your completed tasks involve practical skills.",
                    suggested_task="Try a cooking project, budgeting exercise, or physical activity.",
                    priority=6,
                )
            )

        if interests_percent < self.interests_min_percent:
            recommendations.append(
                LearningRecommendation(
                    id="balance_interests",
                    type=RecommendationType.BALANCE,
                    title="Balance Your Learning: Personal Interests",
                    description=(
                        "Learning is more engaging when you include topics you're passionate about! "
                        "Try adding some interest-driven activities."
                    ),
                    reason=f"Only {round_half_up(interests_percent)}% of your completed tasks are based on personal interests.",
                    suggested_task="Add a task related to a hobby, creative project, or topic you're curious about.",
                    priority=5,
                )
            )

        return recommendations


# ---------------------------------------------------------------------------
# Challenge
# ---------------------------------------------------------------------------


class ChallengeStrategy:
    """Offers a stretch goal in the student's strongest subject."""

    name = "challenge"
    priority = 9

    def __init__(self, min_tasks: int = 10):
        self.min_tasks = min_tasks

    def generate(self, context: RecommendationContext) -> List[LearningRecommendation]:
        # Subject-less tasks still count towards the activity threshold.
        if len(context.completed_tasks) < self.min_tasks:
            return []

        counts = _count_by_subject(context.completed_tasks)
        top_subject = ""
        top_count = 0
        for subject, count in counts.items():
            # strict comparison: on ties the first subject counted wins
            if count > top_count:
                top_subject = subject
                top_count = count

        if not top_subject:
            return []

        text = get_challenge_recommendation_text(top_subject)
        return [
            LearningRecommendation(
                id=recommendation_id(RecommendationType.CHALLENGE, top_subject),
                type=RecommendationType.CHALLENGE,
                title=f"{top_subject} Challenge",
                description=text.description,
                reason=f"You've completed {top_count} tasks in {top_subject}, showing strong progress in this area!",
                suggested_task=text.suggested_task,
                related_subject=top_subject,
                priority=self.priority,
            )
        ]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def recommendation_id(rec_type: RecommendationType, subject: str) -> str:
    """Build the `{type}_{subject_slug}` identifier used by the client."""
    slug = _WHITESPACE_RE.sub("_", subject.lower())
    return f"{rec_type.value}_{slug}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def category_counts(tasks: Sequence[Task]) -> Dict[str, int]:
    """Count completed tasks per balance bucket; unbucketed subjects are ignored."""
    counts = {category: 0 for category in BALANCE_CATEGORIES}
    for task in tasks:
        if not task.subject:
            continue
        for category, subjects in BALANCE_CATEGORIES.items():
            if task.subject in subjects:
                counts[category] += 1
                break
    return counts


def _count_by_subject(tasks: Sequence[Task]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for task in tasks:
        if task.subject:
            counts[task.subject] = counts.get(task.subject, 0) + 1
    return counts
