"""
Team statistics snapshots for display.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .coach import CoachType

if TYPE_CHECKING:
    from .team import Team
    from .weight_category import WeightCategoryTable


@dataclass(frozen=True)
class WeightCategoryBreakdownEntry:
    """Wrestler counts for a single weight category."""
    weight_category: float
    all_count: int = 0
    male_count: int = 0
    female_count: int = 0


@dataclass
class TeamStatistics:
    """
    Point-in-time copy of a team's aggregate statistics.
    Ratios are None when the team has no recorded matches.
    """
    team_name: str

    # Membership counts
    member_count: int = 0
    wrestler_count: int = 0
    male_wrestler_count: int = 0
    female_wrestler_count: int = 0
    coach_count: int = 0
    hands_on_coach_count: int = 0
    support_coach_count: int = 0
    male_coach_count: int = 0
    female_coach_count: int = 0

    # Match statistics
    total_matches: int = 0
    total_wins: int = 0
    total_losses: int = 0
    win_percentage: Optional[float] = None
    loss_percentage: Optional[float] = None
    total_points: int = 0
    total_pin_count: int = 0
    average_points_per_match: Optional[float] = None

    weight_category_breakdown: List[WeightCategoryBreakdownEntry] = field(default_factory=list)

    @classmethod
    def from_team(cls, team: 'Team', weight_categories: 'WeightCategoryTable') -> 'TeamStatistics':
        """Capture the current statistics of a team."""
        return cls(
            team_name=team.name,
            member_count=team.total_members,
            wrestler_count=team.wrestler_count,
            male_wrestler_count=team.male_wrestler_count,
            female_wrestler_count=team.female_wrestler_count,
            coach_count=team.coach_count,
            hands_on_coach_count=team.coach_count_of_type(CoachType.HANDS_ON),
            support_coach_count=team.coach_count_of_type(CoachType.SUPPORT),
            male_coach_count=team.male_coach_count,
            female_coach_count=team.female_coach_count,
            total_matches=team.total_matches,
            total_wins=team.total_wins,
            total_losses=team.total_losses,
            win_percentage=team.win_percentage,
            loss_percentage=team.loss_percentage,
            total_points=team.total_points,
            total_pin_count=team.total_pin_count,
            average_points_per_match=team.average_points_per_match,
            weight_category_breakdown=team.weight_category_breakdown(weight_categories)
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
