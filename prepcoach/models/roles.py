"""
Role, difficulty, and interview type definitions for PrepCoach

Defines the strict taxonomy for:
- Target roles
- Difficulty levels
- Interview types
- Role focus vocabulary and difficulty tone used in prompts
"""

from enum import Enum


class Role(str, Enum):
    """Target role definitions."""

    FRONTEND = "Frontend"
    BACKEND = "Backend"
    MERN = "MERN"
    FULL_STACK = "Full Stack"

    @property
    def display_name(self) -> str:
        """Human-readable role name."""
        names = {
            "Frontend": "Frontend Developer",
            "Backend": "Backend Developer",
            "MERN": "MERN Stack Developer",
            "Full Stack": "Full Stack Developer",
        }
        return names.get(self.value, self.value)

    @property
    def showcase_technology(self) -> str:
        """Technology used in example prompts for this role."""
        showcase = {
            "Frontend": "React",
            "Backend": "Node.js",
        }
        return showcase.get(self.value, "MERN")

    @property
    def showcase_optimization(self) -> str:
        """Optimization target used in example prompts for this role."""
        targets = {
            "Frontend": "a React component",
            "Backend": "an API endpoint",
        }
        return targets.get(self.value, "a full-stack application")


class Difficulty(str, Enum):
    """Interview difficulty levels."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class InterviewType(str, Enum):
    """Kinds of interview a session can run."""

    TECHNICAL = "Technical"
    BEHAVIORAL = "Behavioral"
    MIXED = "Mixed"

    @classmethod
    def _missing_(cls, value: object) -> "InterviewType | None":
        # "HR" is the label older clients send for behavioral sessions
        if isinstance(value, str) and value.strip().upper() == "HR":
            return cls.BEHAVIORAL
        return None


# === PROMPT VOCABULARY ===

DEFAULT_FOCUS = "General development"
DEFAULT_TONE = "Moderate"

ROLE_FOCUS_AREAS: dict[Role, str] = {
    Role.FRONTEND: "React, JavaScript, TypeScript, CSS, frontend frameworks, state management, UI/UX",
    Role.BACKEND: "Node.js, Express, APIs, databases (SQL/NoSQL), server architecture, authentication, security",
    Role.MERN: "MongoDB, Express.js, React, Node.js - full-stack MERN stack concepts and integration",
    Role.FULL_STACK: "Both frontend (React, HTML, CSS, JS) and backend (Node.js, databases, APIs) technologies and system design",
}

DIFFICULTY_TONE: dict[Difficulty, str] = {
    Difficulty.BEGINNER: "Fundamental, basic concepts. Be encouraging and clear.",
    Difficulty.INTERMEDIATE: "Practical, scenario-based questions requiring deeper understanding.",
    Difficulty.ADVANCED: "Complex, system-level questions with edge cases and optimization.",
}


def get_role_focus_areas(role: Role | str) -> str:
    """Get the focus vocabulary for a role, or the generic bucket."""
    try:
        return ROLE_FOCUS_AREAS[Role(role)]
    except ValueError:
        return DEFAULT_FOCUS


def get_difficulty_tone(difficulty: Difficulty | str) -> str:
    """Get the tone guidance for a difficulty, or the moderate bucket."""
    try:
        return DIFFICULTY_TONE[Difficulty(difficulty)]
    except ValueError:
        return DEFAULT_TONE
