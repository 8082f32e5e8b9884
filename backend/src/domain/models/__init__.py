"""
Domain models for the Takedown roster manager.
Contains the roster member records, team aggregate and weight classification.
"""

from .base import Gender, MemberKind, FieldType, MemberField, Member, BASE_FIELDS
from .coach import Coach, CoachType
from .wrestler import Wrestler, WrestlerStatus
from .weight_category import WeightCategoryCollection, WeightCategoryTable
from .team import Team
from .statistics import TeamStatistics, WeightCategoryBreakdownEntry

__all__ = [
    # Base models
    "Gender",
    "MemberKind",
    "FieldType",
    "MemberField",
    "Member",
    "BASE_FIELDS",

    # Member kinds
    "Coach",
    "CoachType",
    "Wrestler",
    "WrestlerStatus",

    # Weight classification
    "WeightCategoryCollection",
    "WeightCategoryTable",

    # Team models
    "Team",
    "TeamStatistics",
    "WeightCategoryBreakdownEntry",
]
