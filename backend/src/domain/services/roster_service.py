"""
Roster domain service.
The operations a front end needs: create, load and save teams, edit members,
and gather statistics.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from config.settings import Settings, settings as default_settings
from core.error_handler import error_handler, with_domain_error_handling
from core.exceptions import ValidationError
from core.utils import LoggerFactory, DataValidator

from adapters.roster import MemberCodec, RosterFile, RosterLoadResult
from ..models.base import FieldType, Member, MemberKind
from ..models.statistics import TeamStatistics
from ..models.team import Team
from ..models.weight_category import WeightCategoryTable


class RosterService:
    """
    Domain service for roster operations.
    Owns the weight category table and the roster file adapter.
    """

    def __init__(
        self,
        weight_categories: WeightCategoryTable,
        app_settings: Optional[Settings] = None,
        roster_file: Optional[RosterFile] = None
    ):
        """
        Args:
            weight_categories: Classification table shared by every team
            app_settings: Settings to use; defaults to the global settings
            roster_file: Roster file adapter; built from the table when omitted
        """
        self.weight_categories = weight_categories
        self.settings = app_settings or default_settings
        self.codec = MemberCodec(weight_categories)
        self.roster_file = roster_file or RosterFile(self.codec)
        self.logger = LoggerFactory.get_logger(self.__class__.__name__)

    @classmethod
    def from_settings(cls, app_settings: Optional[Settings] = None) -> 'RosterService':
        """
        Build a service, loading the weight category resource named in settings.

        Raises:
            ConfigurationError: the weight category resource is missing or invalid.
        """
        app_settings = app_settings or default_settings
        weight_categories = WeightCategoryTable.from_file(app_settings.weight_categories_path)
        return cls(weight_categories, app_settings=app_settings)

    # -------------------------------------------------------------------------
    # Teams
    # -------------------------------------------------------------------------

    def create_team(self, name: str, directory: Optional[Union[str, Path]] = None) -> Team:
        """Create an empty team whose roster file lives in the given directory."""
        try:
            DataValidator.validate_non_empty(name, "Team name")
        except ValueError as e:
            raise ValidationError(field="name", value=name, constraint=str(e))

        filepath = self.settings.roster_path_for(name.strip(), str(directory) if directory else None)
        team = Team(name=name.strip(), filepath=str(filepath))
        self.logger.info(f"Created team '{team.name}' at {filepath}")
        return team

    def load_team(self, filepath: Union[str, Path]) -> RosterLoadResult:
        """Load a team; bad lines are reported in the result rather than raised."""
        return self.roster_file.load(filepath)

    def save_team(self, team: Team, filepath: Optional[Union[str, Path]] = None) -> Path:
        """Save a team to the given path, or to the file it was loaded from."""
        with error_handler.error_boundary(f"save team '{team.name}'"):
            return self.roster_file.save(team, filepath)

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    @with_domain_error_handling("add member")
    def add_member(self, team: Team, kind: MemberKind, member: Optional[Member] = None) -> Member:
        """Add a member to a team; a blank member of the kind is created when none is given."""
        if member is None:
            member = kind.member_class()
        team.add_member(kind, member)
        return member

    def remove_member(self, team: Team, member: Member) -> None:
        team.remove_member(MemberKind.of(member), member)

    @with_domain_error_handling("change member kind")
    def change_member_kind(self, team: Team, member: Member, kind: MemberKind) -> Member:
        """Re-type a member, keeping the shared fields."""
        replacement = team.change_member_kind(member, kind)
        if replacement is not member:
            self.logger.info(
                f"Moved {member.full_name or 'unnamed member'} from "
                f"{MemberKind.of(member).plural} to {kind.plural}"
            )
        return replacement

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def team_statistics(self, team: Team) -> TeamStatistics:
        """Snapshot the team's current statistics."""
        return TeamStatistics.from_team(team, self.weight_categories)

    def roster_table(self, team: Team, kind: MemberKind) -> Tuple[List[str], List[List[str]]]:
        """
        Build column headers and formatted rows for one partition of a team.
        Columns follow the kind's displayable attribute order.
        """
        attributes = kind.member_class.display_attributes()
        headers = [attribute.header for attribute in attributes]
        rows = [
            [
                str(value) if attribute.field_type == FieldType.TEXT else self.codec.format_value(attribute, value)
                for attribute, value in member.attribute_values(self.weight_categories)
            ]
            for member in team.members.get(kind, [])
        ]
        return headers, rows
