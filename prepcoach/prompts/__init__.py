"""
AI prompt templates for PrepCoach

Contains structured prompts for:
- Interviewer instructions and question requests
- Interview evaluation
"""

from prepcoach.prompts.interviewer import InterviewerPrompts
from prepcoach.prompts.evaluator import EvaluatorPrompts

__all__ = [
    "InterviewerPrompts",
    "EvaluatorPrompts",
]
