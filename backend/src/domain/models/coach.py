"""
Coach domain model.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple

from .base import Member, MemberKind, MemberField, FieldType, BASE_FIELDS


class CoachType(str, Enum):
    """The type of coach. Values are the serialized tokens."""
    HANDS_ON = "Hands-on"
    SUPPORT = "Support"


@dataclass
class Coach(Member):
    """The coach data class."""
    coach_type: CoachType = CoachType.HANDS_ON

    FIELDS: ClassVar[Tuple[MemberField, ...]] = BASE_FIELDS + (
        MemberField("coach_type", "CoachType", 5, FieldType.CHOICE, choices=CoachType),
    )

    @property
    def kind(self) -> MemberKind:
        return MemberKind.COACH

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.coach_type, str) and not isinstance(self.coach_type, CoachType):
            self.coach_type = CoachType(self.coach_type)
