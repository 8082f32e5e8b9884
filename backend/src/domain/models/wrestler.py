"""
Wrestler domain model.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple, TYPE_CHECKING

from core.exceptions import ConfigurationError
from .base import Member, MemberKind, MemberField, FieldType, BASE_FIELDS

if TYPE_CHECKING:
    from .weight_category import WeightCategoryTable


class WrestlerStatus(str, Enum):
    """Roster status of a wrestler. Values are the serialized tokens."""
    ACTIVE = "Active"
    INJURED = "Injured"
    QUIT = "Quit"


@dataclass
class Wrestler(Member):
    """
    The wrestler data class.

    Match tallies are stored; totals, percentages and the weight category
    are derived on every access. Percentages and averages are None when the
    wrestler has no recorded matches.
    """
    birthdate: date = field(default_factory=date.today)
    weight: float = 0.0

    wins: int = 0
    losses: int = 0
    wins_by_pin: int = 0
    total_points: int = 0

    status: WrestlerStatus = WrestlerStatus.ACTIVE
    uniform_signed_out: bool = False

    FIELDS: ClassVar[Tuple[MemberField, ...]] = BASE_FIELDS + (
        MemberField("birthdate", "Birthdate", 5, FieldType.DATE),
        MemberField("weight", "Weight", 6, FieldType.FLOAT),
        MemberField("weight_category", "WeightCategory", 7, FieldType.FLOAT, derived=True),
        MemberField("wins", "Wins", 8, FieldType.INTEGER),
        MemberField("losses", "Losses", 9, FieldType.INTEGER),
        MemberField("total_points", "TotalPoints", 10, FieldType.INTEGER),
        MemberField("wins_by_pin", "WinsByPin", 11, FieldType.INTEGER),
        MemberField("status", "Status", 12, FieldType.CHOICE, choices=WrestlerStatus),
        MemberField("uniform_signed_out", "UniformSignedOut", 13, FieldType.BOOLEAN),
    )

    @property
    def kind(self) -> MemberKind:
        return MemberKind.WRESTLER

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.status, str) and not isinstance(self.status, WrestlerStatus):
            self.status = WrestlerStatus(self.status)

    @property
    def total_matches(self) -> int:
        return self.wins + self.losses

    @property
    def win_percentage(self) -> Optional[float]:
        """Wins as a percentage of total matches."""
        if self.total_matches == 0:
            return None
        return self.wins / self.total_matches * 100.0

    @property
    def loss_percentage(self) -> Optional[float]:
        """Losses as a percentage of total matches."""
        if self.total_matches == 0:
            return None
        return self.losses / self.total_matches * 100.0

    @property
    def average_match_points(self) -> Optional[float]:
        if self.total_matches == 0:
            return None
        return self.total_points / self.total_matches

    def weight_category(self, weight_categories: 'WeightCategoryTable') -> float:
        """Classify this wrestler's current weight into a weight category."""
        return weight_categories.classify(self.gender, self.weight)

    def attribute_value(
        self,
        member_field: MemberField,
        weight_categories: Optional['WeightCategoryTable'] = None
    ) -> Any:
        if member_field.attribute == "weight_category":
            if weight_categories is None:
                raise ConfigurationError(
                    "weight_categories",
                    "a weight category table is required to classify wrestlers"
                )
            return self.weight_category(weight_categories)
        return super().attribute_value(member_field, weight_categories)
