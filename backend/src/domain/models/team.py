"""
Team domain model: a named, file-backed collection of members partitioned by kind.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING

from core.exceptions import ValidationError, MemberNotFoundError
from .base import Gender, Member, MemberKind
from .coach import Coach, CoachType
from .wrestler import Wrestler

if TYPE_CHECKING:
    from .statistics import WeightCategoryBreakdownEntry
    from .weight_category import WeightCategoryTable


@dataclass
class Team:
    """
    A wrestling team.

    Members live in one ordered list per kind; insertion order is display and
    save order. Wrestler statistics are recomputed on every access.
    """
    name: str
    filepath: Optional[str] = None
    members: Dict[MemberKind, List[Member]] = field(default_factory=dict)

    @classmethod
    def name_from_filepath(cls, filepath: str) -> str:
        """Derive a team name from a roster file path."""
        return Path(filepath).stem

    # -------------------------------------------------------------------------
    # Partition management
    # -------------------------------------------------------------------------

    def add_member(self, kind: MemberKind, member: Member) -> None:
        """Append a member to the partition for its kind."""
        if MemberKind.of(member) != kind:
            raise ValidationError(
                field="kind",
                value=kind.value,
                constraint=f"a {MemberKind.of(member).value} cannot be added as a {kind.value}"
            )
        self.members.setdefault(kind, []).append(member)

    def remove_member(self, kind: MemberKind, member: Member) -> None:
        """Remove a member instance from a partition. Absent kinds or members are ignored."""
        partition = self.members.get(kind)
        if not partition:
            return
        index = _index_of(partition, member)
        if index is not None:
            del partition[index]

    def members_of_kind(self, kind: MemberKind) -> List[Member]:
        """
        Get the live partition for a kind.
        A kind with no partition yields a fresh empty list and is not added to the team.
        """
        return self.members.get(kind, [])

    def iter_members(self) -> Iterator[Tuple[MemberKind, Member]]:
        """Iterate over every member, partition by partition, in insertion order."""
        for kind, partition in self.members.items():
            for member in partition:
                yield kind, member

    def change_member_kind(self, member: Member, new_kind: MemberKind) -> Member:
        """
        Move a member to another kind.

        The original instance leaves its partition; a new member of the target
        kind, sharing the base fields, is appended to the target partition.
        """
        old_kind = MemberKind.of(member)
        if old_kind == new_kind:
            return member

        partition = self.members.get(old_kind, [])
        index = _index_of(partition, member)
        if index is None:
            raise MemberNotFoundError(member.full_name, self.name)

        del partition[index]
        replacement = new_kind.member_class.from_member(member)
        self.add_member(new_kind, replacement)
        return replacement

    # -------------------------------------------------------------------------
    # Counts
    # -------------------------------------------------------------------------

    def count(self, kind: MemberKind) -> int:
        return len(self.members.get(kind, []))

    def count_by_gender(self, kind: MemberKind, gender: Gender) -> int:
        return sum(1 for member in self.members.get(kind, []) if member.gender == gender)

    def coach_count_of_type(self, coach_type: CoachType) -> int:
        return sum(1 for coach in self._coaches() if coach.coach_type == coach_type)

    @property
    def total_members(self) -> int:
        return sum(len(partition) for partition in self.members.values())

    @property
    def wrestler_count(self) -> int:
        return self.count(MemberKind.WRESTLER)

    @property
    def male_wrestler_count(self) -> int:
        return self.count_by_gender(MemberKind.WRESTLER, Gender.MALE)

    @property
    def female_wrestler_count(self) -> int:
        return self.count_by_gender(MemberKind.WRESTLER, Gender.FEMALE)

    @property
    def coach_count(self) -> int:
        return self.count(MemberKind.COACH)

    @property
    def male_coach_count(self) -> int:
        return self.count_by_gender(MemberKind.COACH, Gender.MALE)

    @property
    def female_coach_count(self) -> int:
        return self.count_by_gender(MemberKind.COACH, Gender.FEMALE)

    # -------------------------------------------------------------------------
    # Wrestler statistics
    # -------------------------------------------------------------------------

    @property
    def total_matches(self) -> int:
        return sum(wrestler.total_matches for wrestler in self._wrestlers())

    @property
    def total_wins(self) -> int:
        return sum(wrestler.wins for wrestler in self._wrestlers())

    @property
    def total_losses(self) -> int:
        return sum(wrestler.losses for wrestler in self._wrestlers())

    @property
    def win_percentage(self) -> Optional[float]:
        """Team wins as a percentage of all matches; None when no matches were wrestled."""
        total_matches = self.total_matches
        if total_matches == 0:
            return None
        return self.total_wins / total_matches * 100.0

    @property
    def loss_percentage(self) -> Optional[float]:
        total_matches = self.total_matches
        if total_matches == 0:
            return None
        return self.total_losses / total_matches * 100.0

    @property
    def total_points(self) -> int:
        return sum(wrestler.total_points for wrestler in self._wrestlers())

    @property
    def total_pin_count(self) -> int:
        return sum(wrestler.wins_by_pin for wrestler in self._wrestlers())

    @property
    def average_points_per_match(self) -> Optional[float]:
        total_matches = self.total_matches
        if total_matches == 0:
            return None
        return self.total_points / total_matches

    def weight_category_breakdown(
        self,
        weight_categories: 'WeightCategoryTable'
    ) -> List['WeightCategoryBreakdownEntry']:
        """Count wrestlers per weight category, overall and by gender."""
        from .statistics import WeightCategoryBreakdownEntry

        classified = [
            (wrestler.gender, wrestler.weight_category(weight_categories))
            for wrestler in self._wrestlers()
        ]

        entries = []
        for category in weight_categories.all_categories():
            in_category = [gender for gender, weight_category in classified if weight_category == category]
            entries.append(WeightCategoryBreakdownEntry(
                weight_category=category,
                all_count=len(in_category),
                male_count=in_category.count(Gender.MALE),
                female_count=in_category.count(Gender.FEMALE)
            ))
        return entries

    def _wrestlers(self) -> List[Wrestler]:
        return self.members.get(MemberKind.WRESTLER, [])

    def _coaches(self) -> List[Coach]:
        return self.members.get(MemberKind.COACH, [])


def _index_of(partition: List[Member], member: Member) -> Optional[int]:
    # Identity, not equality: two identical rows are still distinct members.
    for index, candidate in enumerate(partition):
        if candidate is member:
            return index
    return None
