"""
Domain services for the Takedown roster manager.
Contains the operations front ends use to work with teams and rosters.
"""

from .roster_service import RosterService

__all__ = [
    "RosterService",
]
