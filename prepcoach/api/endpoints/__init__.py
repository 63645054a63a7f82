"""
API endpoint modules for PrepCoach
"""

from prepcoach.api.endpoints import interview, metadata

__all__ = ["interview", "metadata"]
