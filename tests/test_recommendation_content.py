"""
Tests for the subject lookup tables and their generic fallbacks.
"""
from learning_service.recommendations import (
    DEFAULT_SUBJECTS,
    SUBJECT_CATEGORIES,
    get_challenge_recommendation_text,
    get_skill_recommendation_text,
    get_subject_recommendation_text,
    get_subject_resources,
)
from learning_service.recommendations.strategies import BALANCE_CATEGORIES


class TestSubjectLookups:
    """Every known subject has curated content; unknown ones fall back."""

    def test_known_subjects_have_curated_text(self):
        for subject in SUBJECT_CATEGORIES:
            exploration = get_subject_recommendation_text(subject)
            skill = get_skill_recommendation_text(subject)
            challenge = get_challenge_recommendation_text(subject)

            assert exploration.description != f"Explore {subject} through engaging activities and projects."
            assert exploration.reason
            assert skill.reason
            assert challenge.reason is None
            assert challenge.suggested_task

    def test_exploration_fallback(self):
        text = get_subject_recommendation_text("Robotics")
        assert text.description == "Explore Robotics through engaging activities and projects."
        assert text.reason == "Adding Robotics to your learning routine will broaden your knowledge and skills."
        assert text.suggested_task == "Try a beginner-friendly Robotics activity or lesson."

    def test_skill_fallback(self):
        text = get_skill_recommendation_text("Robotics")
        assert text.description == "Enhance your Robotics skills with more advanced challenges."
        assert text.reason == "Your consistent work in Robotics shows you're ready for the next level."

    def test_challenge_fallback(self):
        text = get_challenge_recommendation_text("Robotics")
        assert text.suggested_task == (
            "Set a challenging Robotics goal that builds on your current knowledge and skills."
        )

    def test_known_subject_resources(self):
        resources = get_subject_resources("Mathematics")
        assert [r.title for r in resources] == [
            "Khan Academy - Mathematics",
            "Desmos Graphing Calculator",
            "Brilliant.org - Math Courses",
        ]

    def test_generic_resources_for_unknown_subject(self):
        resources = get_subject_resources("Robotics")
        assert [r.title for r in resources] == ["Khan Academy", "YouTube Learning"]
        assert resources[0].url == "https://www.khanacademy.org/"
        assert resources[1].url == "https://www.youtube.com/learning"

    def test_resources_returns_fresh_list(self):
        first = get_subject_resources("Science")
        first.clear()
        assert len(get_subject_resources("Science")) == 3

    def test_lookup_is_case_sensitive(self):
        assert get_subject_resources("mathematics")[0].title == "Khan Academy"

    def test_default_subjects_cover_balance_buckets(self):
        names = {subject.name for subject in DEFAULT_SUBJECTS}
        bucketed = {name for subjects in BALANCE_CATEGORIES.values() for name in subjects}
        assert names == bucketed == set(SUBJECT_CATEGORIES)
