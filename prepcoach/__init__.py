"""
PrepCoach - AI-Powered Mock Interview Engine

Runs role-specific mock interviews for web developers: asks adaptive
questions one at a time, then scores the finished transcript with
structured feedback. Falls back to an offline question bank and
heuristic scorer when no completion API is available.
"""

__version__ = "0.1.0"
