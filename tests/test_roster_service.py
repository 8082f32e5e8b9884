"""
Tests for the roster domain service.
"""

from unittest.mock import Mock

import pytest

from test_utils import COACH_LINE, WRESTLER_LINE, RosterDataFactory

from config.settings import Settings
from core.error_handler import error_handler
from core.exceptions import (
    ConfigurationError, DomainException, RosterFileError, ValidationError
)
from domain.models import Coach, MemberKind, Team, Wrestler
from domain.services import RosterService


class TestRosterServiceTeams:
    """Test team lifecycle operations."""

    def setup_method(self):
        self.weight_categories = RosterDataFactory.weight_categories()

    def make_service(self, directory) -> RosterService:
        return RosterService(
            self.weight_categories,
            app_settings=Settings(roster_directory=str(directory))
        )

    def test_create_team(self, tmp_path):
        team = self.make_service(tmp_path).create_team("Eagles")

        assert team.name == "Eagles"
        assert team.filepath == str(tmp_path / "Eagles.txt")
        assert team.total_members == 0

    def test_create_team_in_directory(self, tmp_path):
        other = tmp_path / "other"
        team = self.make_service(tmp_path).create_team("  Eagles ", other)
        assert team.name == "Eagles"
        assert team.filepath == str(other / "Eagles.txt")

    def test_create_team_requires_name(self, tmp_path):
        with pytest.raises(ValidationError):
            self.make_service(tmp_path).create_team("   ")

    def test_save_and_load(self, tmp_path):
        service = self.make_service(tmp_path)
        team = service.create_team("Eagles")
        service.add_member(team, MemberKind.WRESTLER, RosterDataFactory.create_wrestler())

        path = service.save_team(team)
        result = service.load_team(path)

        assert path.read_text(encoding="utf-8") == WRESTLER_LINE + "\n"
        assert result.team.members_of_kind(MemberKind.WRESTLER) == team.members_of_kind(MemberKind.WRESTLER)

    def test_blank_member_must_be_filled_in_before_saving(self, tmp_path):
        service = self.make_service(tmp_path)
        team = service.create_team("Eagles")
        service.save_team(team)
        coach = service.add_member(team, MemberKind.COACH)

        with pytest.raises(ValidationError):
            service.save_team(team)
        assert (tmp_path / "Eagles.txt").read_bytes() == b""

        coach.first_name, coach.last_name, coach.school = "Dan", "Gable", "Central"
        service.save_team(team)
        assert service.load_team(team.filepath).team.coach_count == 1

    def test_failed_save_is_recorded(self, tmp_path):
        error_handler.reset_stats()
        service = self.make_service(tmp_path)

        with pytest.raises(RosterFileError):
            service.save_team(Team(name="Nowhere"))

        assert error_handler.get_failure_stats()["save team 'Nowhere'"]["failures"] == 1

    def test_load_reports_errors(self, tmp_path):
        path = RosterDataFactory.write_roster(tmp_path, "Eagles", [COACH_LINE, "Coach,Gable"])

        result = self.make_service(tmp_path).load_team(path)

        assert result.team.coach_count == 1
        assert result.error_count == 1


class TestRosterServiceMembers:
    """Test member editing through the service."""

    def setup_method(self):
        self.service = RosterService(RosterDataFactory.weight_categories())
        self.team = Team(name="Eagles")

    def test_add_blank_member(self):
        wrestler = self.service.add_member(self.team, MemberKind.WRESTLER)

        assert isinstance(wrestler, Wrestler)
        assert self.team.members_of_kind(MemberKind.WRESTLER) == [wrestler]

    def test_add_given_member(self):
        coach = RosterDataFactory.create_coach()
        assert self.service.add_member(self.team, MemberKind.COACH, coach) is coach
        assert self.team.coach_count == 1

    def test_add_member_kind_mismatch_passes_through(self):
        with pytest.raises(ValidationError):
            self.service.add_member(self.team, MemberKind.COACH, RosterDataFactory.create_wrestler())

    def test_unexpected_errors_become_domain_errors(self):
        broken_team = Mock(spec=Team)
        broken_team.add_member.side_effect = KeyError("partition")

        with pytest.raises(DomainException) as exc_info:
            self.service.add_member(broken_team, MemberKind.COACH)
        assert isinstance(exc_info.value.original_error, KeyError)

    def test_remove_member(self):
        coach = self.service.add_member(self.team, MemberKind.COACH)
        self.service.remove_member(self.team, coach)
        assert self.team.coach_count == 0

    def test_change_member_kind(self):
        wrestler = self.service.add_member(self.team, MemberKind.WRESTLER, RosterDataFactory.create_wrestler())

        coach = self.service.change_member_kind(self.team, wrestler, MemberKind.COACH)

        assert isinstance(coach, Coach)
        assert coach.full_name == "Ada Lopez"
        assert self.team.wrestler_count == 0
        assert self.team.members_of_kind(MemberKind.COACH) == [coach]


class TestRosterServiceViews:
    """Test table and statistics views."""

    def setup_method(self):
        self.service = RosterService(RosterDataFactory.weight_categories())
        self.team = RosterDataFactory.create_team()

    def test_wrestler_table(self):
        headers, rows = self.service.roster_table(self.team, MemberKind.WRESTLER)

        assert headers[0] == "Last Name"
        assert headers[7] == "Weight Category"
        assert rows[0] == [
            "Lopez", "Ada", "Female", "Central", "3", "03/04/2008", "58.5", "60",
            "12", "4", "96", "5", "Injured", "true",
        ]
        assert rows[1][7] == "70"

    def test_table_shows_text_as_is(self):
        self.team.members_of_kind(MemberKind.COACH)[0].school = "Central, North"

        _, rows = self.service.roster_table(self.team, MemberKind.COACH)

        assert rows == [["Gable", "Dan", "Male", "Central, North", "30", "Support"]]

    def test_table_for_missing_partition(self):
        headers, rows = self.service.roster_table(Team(name="Empty"), MemberKind.COACH)
        assert headers[-1] == "Coach Type"
        assert rows == []

    def test_team_statistics(self):
        statistics = self.service.team_statistics(self.team)

        assert statistics.wrestler_count == 2
        assert statistics.total_wins == 20
        assert [entry.weight_category for entry in statistics.weight_category_breakdown] == [55, 60, 61, 65, 70]


class TestRosterServiceSettings:
    """Test building the service from settings."""

    def test_from_default_settings(self):
        service = RosterService.from_settings(Settings())
        assert service.weight_categories.all_categories()[0] == 100

    def test_from_settings_with_custom_resource(self, tmp_path):
        path = RosterDataFactory.write_weight_categories(tmp_path)

        service = RosterService.from_settings(Settings(weight_categories_path=str(path)))

        assert service.weight_categories.all_categories() == [55, 60, 61, 65, 70]
        assert service.settings.weight_categories_path == str(path)

    def test_missing_resource_is_fatal(self, tmp_path):
        with pytest.raises(ConfigurationError):
            RosterService.from_settings(Settings(weight_categories_path=str(tmp_path / "nope.json")))
