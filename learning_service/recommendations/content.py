"""
Static recommendation content keyed by subject name.

Every lookup falls back to generic text built from the literal subject
string, so an unrecognised subject never breaks recommendation generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..models import LearningResource, Subject


@dataclass(frozen=True, slots=True)
class RecommendationText:
    """Text block used to fill in a recommendation."""

    description: str
    suggested_task: str
    reason: Optional[str] = None


# ---------------------------------------------------------------------------
# Subjects
# ---------------------------------------------------------------------------

SUBJECT_CATEGORIES = (
    "Mathematics",
    "Science",
    "History",
    "English",
    "Physical Activity",
    "Life Skills",
    "Interest / Passion",
)

DEFAULT_SUBJECTS = (
    Subject(name="Mathematics", color="#3B82F6"),
    Subject(name="Science", color="#10B981"),
    Subject(name="History", color="#F59E0B"),
    Subject(name="English", color="#EF4444"),
    Subject(name="Physical Activity", color="#EC4899"),
    Subject(name="Life Skills", color="#F97316"),
    Subject(name="Interest / Passion", color="#14B8A6"),
)


# ---------------------------------------------------------------------------
# Exploration text
# ---------------------------------------------------------------------------

_EXPLORATION_TEXT: Mapping[str, RecommendationText] = MappingProxyType({
    "Mathematics": RecommendationText(
        description="Explore math concepts through engaging activities and problems.",
        reason="Adding mathematical thinking to your learning routine helps develop logical reasoning skills.",
        suggested_task="Try a Khan Academy math lesson or solve a logic puzzle.",
    ),
    "Science": RecommendationText(
        description="Discover scientific concepts through experiments and observations.",
        reason="Scientific exploration helps develop critical thinking and analytical skills.",
        suggested_task="Conduct a simple home experiment or watch an educational science video.",
    ),
    "History": RecommendationText(
        description="Explore historical events and their impact on our world today.",
        reason="Understanding history helps develop perspective and critical analysis of current events.",
        suggested_task="Read about a historical figure or event that interests you.",
    ),
    "English": RecommendationText(
        description="Develop reading and writing skills through engaging with stories and communication.",
        reason="Strong language skills are fundamental to success in all areas of learning.",
        suggested_task="Read a short story or write in a journal for 15 minutes.",
    ),
    "Physical Activity": RecommendationText(
        description="Get moving with physical activities that build strength, endurance, and coordination.",
        reason="Physical activity improves brain function, mood, and overall health.",
        suggested_task="Try a 20-minute workout, yoga session, or outdoor walk.",
    ),
    "Life Skills": RecommendationText(
        description="Develop practical skills that prepare you for daily life and independence.",
        reason="Life skills build confidence and prepare you for real-world challenges.",
        suggested_task="Learn a basic cooking recipe or create a personal budget.",
    ),
    "Interest / Passion": RecommendationText(
        description="Explore topics that spark your curiosity and creativity.",
        reason="Following your interests increases motivation and makes learning more enjoyable.",
        suggested_task="Spend time on a hobby or creative project that excites you.",
    ),
})


# ---------------------------------------------------------------------------
# Skill development text
# ---------------------------------------------------------------------------

_SKILL_TEXT: Mapping[str, RecommendationText] = MappingProxyType({
    "Mathematics": RecommendationText(
        description="Take your math skills to the next level with more challenging problems.",
        reason="You've shown consistent interest in mathematics. Developing advanced skills will help with complex problem-solving.",
        suggested_task="Try a challenging math problem set or explore a new mathematical concept.",
    ),
    "Science": RecommendationText(
        description="Deepen your understanding of scientific concepts with more advanced experiments and studies.",
        reason="Your consistent work in science shows you're ready to tackle more complex scientific thinking.",
        suggested_task="Design your own experiment or dive into a specific scientific field that interests you.",
    ),
    "History": RecommendationText(
        description="Develop deeper historical analysis skills by exploring connections between different time periods.",
        reason="Your history work shows you're ready to understand more complex historical relationships.",
        suggested_task="Compare two historical events or research primary sources about a historical topic.",
    ),
    "English": RecommendationText(
        description="Enhance your language and communication skills through more advanced reading and writing.",
        reason="Your consistent English practice shows you're ready for more complex language challenges.",
        suggested_task="Read a challenging article or book, or write a persuasive essay on a topic you care about.",
    ),
    "Physical Activity": RecommendationText(
        description="Progress in your physical activities by setting new goals and challenges.",
        reason="Your consistent physical activity shows you're ready to take on new physical challenges.",
        suggested_task="Try increasing the intensity of your workouts or learn a new sport or physical skill.",
    ),
    "Life Skills": RecommendationText(
        description="Build on your practical skills with more advanced projects and responsibilities.",
        reason="You've mastered basic life skills and are ready for more complex challenges.",
        suggested_task="Take on a multi-step cooking project or create a more detailed financial plan.",
    ),
    "Interest / Passion": RecommendationText(
        description="Take your personal interests to a deeper level with more advanced projects.",
        reason="Your consistent work in this area shows you're ready to develop more specialized skills.",
        suggested_task="Create a more ambitious project related to your interests or share your knowledge with others.",
    ),
})


# ---------------------------------------------------------------------------
# Challenge text (no reason: the engine builds it from the task count)
# ---------------------------------------------------------------------------

_CHALLENGE_TEXT: Mapping[str, RecommendationText] = MappingProxyType({
    "Mathematics": RecommendationText(
        description="Challenge yourself with an advanced mathematical concept or problem-solving task.",
        suggested_task="Try solving a challenging math puzzle or exploring a new area of mathematics.",
    ),
    "Science": RecommendationText(
        description="Take on a more complex scientific challenge that tests your understanding and creativity.",
        suggested_task="Design and conduct an experiment to test a hypothesis you've formed.",
    ),
    "History": RecommendationText(
        description="Challenge yourself with a deeper historical analysis that connects multiple time periods or perspectives.",
        suggested_task="Research and analyze a historical event from multiple perspectives.",
    ),
    "English": RecommendationText(
        description="Push your language and communication skills with a challenging writing or analysis project.",
        suggested_task="Write a short story or essay that incorporates advanced literary techniques.",
    ),
    "Physical Activity": RecommendationText(
        description="Set a challenging physical goal that will push your limits and build new skills.",
        suggested_task="Create and complete a personal fitness challenge that extends your current abilities.",
    ),
    "Life Skills": RecommendationText(
        description="Take on a more complex life skill project that combines multiple areas of expertise.",
        suggested_task="Plan and execute a multi-day project that requires planning, budgeting, and hands-on skills.",
    ),
    "Interest / Passion": RecommendationText(
        description="Challenge yourself to take your personal interests to a new level of expertise or creativity.",
        suggested_task="Create something that showcases your skills and knowledge in your area of interest.",
    ),
})


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

def _resource(title: str, url: str, description: str) -> LearningResource:
    return LearningResource(title=title, url=url, description=description)


_SUBJECT_RESOURCES: Mapping[str, tuple] = MappingProxyType({
    "Mathematics": (
        _resource("Khan Academy - Mathematics", "https://www.khanacademy.org/math",
                  "Free interactive lessons covering everything from basic arithmetic to calculus"),
        _resource("Desmos Graphing Calculator", "https://www.desmos.com/calculator",
                  "Interactive graphing calculator for exploring mathematical concepts visually"),
        _resource("Brilliant.org - Math Courses", "https://brilliant.org/courses/#math-foundational",
                  "Interactive courses that build problem-solving skills through challenges"),
    ),
    "Science": (
        _resource("Khan Academy - Science", "https://www.khanacademy.org/science",
                  "Comprehensive lessons covering physics, chemistry, biology, and more"),
        _resource("NASA STEM Engagement", "https://www.nasa.gov/stem/",
                  "Educational resources from NASA for exploring space science"),
        _resource("PhET Interactive Simulations", "https://phet.colorado.edu/",
                  "Interactive science simulations that make learning through exploration"),
    ),
    "History": (
        _resource("Khan Academy - History", "https://www.khanacademy.org/humanities/world-history",
                  "Comprehensive world history lessons and resources"),
        _resource("Crash Course History",
                  "https://www.youtube.com/playlist?list=PL8dPuuaLjXtMwmepBjTSG593eG7ObzO7s",
                  "Engaging video series covering major historical topics"),
        _resource("National Geographic History", "https://www.nationalgeographic.com/history",
                  "Articles and resources exploring various historical topics and cultures"),
    ),
    "English": (
        _resource("Purdue Online Writing Lab", "https://owl.purdue.edu/",
                  "Comprehensive writing resources covering grammar, style, and more"),
        _resource("CommonLit", "https://www.commonlit.org/",
                  "Free collection of fiction and nonfiction texts for reading practice"),
        _resource("Grammarly", "https://www.grammarly.com/",
                  "Tool for improving writing with grammar and style suggestions"),
    ),
    "Physical Activity": (
        _resource("Darebee Fitness", "https://darebee.com/",
                  "Free visual workouts, fitness programs, and challenges"),
        _resource("Yoga With Adriene", "https://yogawithadriene.com/",
                  "Free yoga videos for all levels and wellness practices"),
        _resource("NHS Physical Activity Guidelines", "https://www.nhs.uk/live-well/exercise/",
                  "Evidence-based guidelines for physical activity and exercise"),
    ),
    "Life Skills": (
        _resource("Practical Money Skills", "https://www.practicalmoneyskills.com/",
                  "Financial literacy resources for budgeting and money management"),
        _resource("AllRecipes", "https://www.allrecipes.com/recipes/1642/everyday-cooking/quick-and-easy/",
                  "Collection of simple recipes for beginners learning to cook"),
        _resource("Ted Talks - Life Skills", "https://www.ted.com/topics/life",
                  "Inspiring talks on various aspects of life skills and personal development"),
    ),
    "Interest / Passion": (
        _resource("Coursera", "https://www.coursera.org/",
                  "Online courses covering virtually any subject of interest"),
        _resource("Instructables", "https://www.instructables.com/",
                  "DIY project tutorials for creative hobbies and interests"),
        _resource("edX", "https://www.edx.org/",
                  "Free courses from top universities on a wide variety of subjects"),
    ),
})

_GENERIC_RESOURCES = (
    _resource("Khan Academy", "https://www.khanacademy.org/",
              "Free educational resources covering a wide range of subjects"),
    _resource("YouTube Learning", "https://www.youtube.com/learning",
              "Educational videos on virtually any topic"),
)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def get_subject_recommendation_text(subject: str) -> RecommendationText:
    """Text for an exploration recommendation, with a generic fallback."""
    text = _EXPLORATION_TEXT.get(subject)
    if text is not None:
        return text
    return RecommendationText(
        description=f"Explore {subject} through engaging activities and projects.",
        reason=f"Adding {subject} to your learning routine will broaden your knowledge and skills.",
        suggested_task=f"Try a beginner-friendly {subject} activity or lesson.",
    )


def get_skill_recommendation_text(subject: str) -> RecommendationText:
    """Text for a skill development recommendation, with a generic fallback."""
    text = _SKILL_TEXT.get(subject)
    if text is not None:
        return text
    return RecommendationText(
        description=f"Enhance your {subject} skills with more advanced challenges.",
        reason=f"Your consistent work in {subject} shows you're ready for the next level.",
        suggested_task=f"Try a more challenging {subject} activity or project.",
    )


def get_challenge_recommendation_text(subject: str) -> RecommendationText:
    """Text for a challenge recommendation, with a generic fallback."""
    text = _CHALLENGE_TEXT.get(subject)
    if text is not None:
        return text
    return RecommendationText(
        description=f"Challenge yourself with an advanced {subject} project that pushes your boundaries.",
        suggested_task=f"Set a challenging {subject} goal that builds on your current knowledge and skills.",
    )


def get_subject_resources(subject: str) -> List[LearningResource]:
    """Curated resources for a subject; generic links for unknown subjects."""
    return list(_SUBJECT_RESOURCES.get(subject, _GENERIC_RESOURCES))
