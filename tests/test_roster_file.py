"""
Tests for loading and saving whole roster files.
"""

import logging

import pytest

from test_utils import COACH_LINE, WRESTLER_LINE, RosterDataFactory, assert_members_equal

from adapters.roster import MemberCodec, RosterFile
from core.exceptions import (
    MemberParseError, RosterFileError, RosterFileNotFoundError, UnknownMemberTypeError,
    ValidationError
)
from domain.models import Coach, MemberKind, Team


class TestRosterSave:
    """Test writing teams to disk."""

    def setup_method(self):
        self.roster_file = RosterFile(MemberCodec(RosterDataFactory.weight_categories()))

    def test_one_line_per_member(self, tmp_path):
        team = RosterDataFactory.create_team()
        path = self.roster_file.save(team, tmp_path / "Eagles.txt")

        lines = path.read_text(encoding="utf-8").split("\n")
        assert lines[-1] == ""
        assert lines[:2] == [COACH_LINE, WRESTLER_LINE]
        assert len(lines) == 4
        assert team.filepath == str(path)

    def test_partitions_saved_in_insertion_order(self, tmp_path):
        team = Team(name="Eagles")
        team.add_member(MemberKind.WRESTLER, RosterDataFactory.create_wrestler())
        team.add_member(MemberKind.COACH, RosterDataFactory.create_coach())
        team.add_member(MemberKind.WRESTLER, RosterDataFactory.create_wrestler(first_name="Bea"))

        path = self.roster_file.save(team, tmp_path / "Eagles.txt")

        tags = [line.split(",")[0] for line in path.read_text(encoding="utf-8").splitlines()]
        assert tags == ["Wrestler", "Wrestler", "Coach"]

    def test_empty_team_writes_empty_file(self, tmp_path):
        path = self.roster_file.save(Team(name="Empty"), tmp_path / "Empty.txt")
        assert path.read_bytes() == b""

    def test_save_defaults_to_team_filepath(self, tmp_path):
        team = RosterDataFactory.create_team(filepath=str(tmp_path / "Eagles.txt"))
        path = self.roster_file.save(team)
        assert path == tmp_path / "Eagles.txt"
        assert path.exists()

    def test_save_without_path_fails(self):
        with pytest.raises(RosterFileError) as exc_info:
            self.roster_file.save(Team(name="Nowhere"))
        assert exc_info.value.context.operation == "save roster"

    def test_unwritable_path_is_wrapped(self, tmp_path):
        target = tmp_path / "missing" / "Eagles.txt"

        with pytest.raises(RosterFileError) as exc_info:
            self.roster_file.save(RosterDataFactory.create_team(), target)

        assert isinstance(exc_info.value.original_error, OSError)
        assert exc_info.value.context.filepath == str(target)

    def test_unencodable_member_leaves_file_untouched(self, tmp_path):
        team = RosterDataFactory.create_team()
        path = self.roster_file.save(team, tmp_path / "Eagles.txt")
        before = path.read_bytes()

        team.members_of_kind(MemberKind.COACH)[0].school = "Central, North"
        with pytest.raises(ValidationError):
            self.roster_file.save(team)

        assert path.read_bytes() == before

    def test_unicode_line_separator_is_not_written(self, tmp_path):
        team = RosterDataFactory.create_team()
        path = self.roster_file.save(team, tmp_path / "Eagles.txt")
        before = path.read_bytes()

        team.members_of_kind(MemberKind.COACH)[0].school = "North\u2028High"
        with pytest.raises(ValidationError):
            self.roster_file.save(team)

        assert path.read_bytes() == before
        assert self.roster_file.load(path).team.coach_count == 1

    def test_member_that_would_not_load_is_not_written(self, tmp_path):
        team = RosterDataFactory.create_team()
        team.add_member(MemberKind.COACH, Coach())

        with pytest.raises(ValidationError):
            self.roster_file.save(team, tmp_path / "Eagles.txt")

        assert not (tmp_path / "Eagles.txt").exists()


class TestRosterLoad:
    """Test reading teams from disk."""

    def setup_method(self):
        self.roster_file = RosterFile(MemberCodec(RosterDataFactory.weight_categories()))

    def test_round_trip(self, tmp_path):
        team = RosterDataFactory.create_team()
        path = self.roster_file.save(team, tmp_path / "Eagles.txt")

        result = self.roster_file.load(path)

        assert result.success
        assert not result.has_errors
        assert result.team.name == "Eagles"
        assert result.team.filepath == str(path)
        for kind in MemberKind:
            assert_members_equal(result.team.members_of_kind(kind), team.members_of_kind(kind))

    def test_resave_is_byte_identical(self, tmp_path):
        first = self.roster_file.save(RosterDataFactory.create_team(), tmp_path / "Eagles.txt")
        loaded = self.roster_file.load(first).team

        second = self.roster_file.save(loaded, tmp_path / "Copy.txt")

        assert second.read_bytes() == first.read_bytes()

    def test_team_name_is_file_stem(self, tmp_path):
        path = RosterDataFactory.write_roster(tmp_path, "North Hawks", [COACH_LINE])
        assert self.roster_file.load(path).team.name == "North Hawks"

    def test_unknown_type_line_is_skipped(self, tmp_path, caplog):
        path = RosterDataFactory.write_roster(tmp_path, "Eagles", [
            WRESTLER_LINE,
            "Referee,Smith,Joe,Male,Central,4",
        ])

        with caplog.at_level(logging.WARNING):
            result = self.roster_file.load(path)

        assert result.success
        assert result.team.wrestler_count == 1
        assert result.team.total_members == 1
        assert result.error_count == 1
        assert isinstance(result.errors[0], UnknownMemberTypeError)
        assert result.errors[0].line_number == 2
        assert "Referee" in caplog.text

    def test_bad_line_does_not_stop_loading(self, tmp_path):
        broken = WRESTLER_LINE.replace("03/04/2008", "2008-03-04")
        path = RosterDataFactory.write_roster(tmp_path, "Eagles", [broken, COACH_LINE, WRESTLER_LINE])

        result = self.roster_file.load(path)

        assert result.team.coach_count == 1
        assert result.team.wrestler_count == 1
        assert isinstance(result.errors[0], MemberParseError)
        assert result.errors[0].field == "Birthdate"
        assert result.errors[0].line_number == 1
        assert "1 error(s)" in result.summary()

    def test_blank_lines_are_skipped(self, tmp_path):
        path = RosterDataFactory.write_roster(tmp_path, "Eagles", ["", COACH_LINE, "   ", WRESTLER_LINE, ""])

        result = self.roster_file.load(path)

        assert not result.has_errors
        assert result.team.total_members == 2

    def test_windows_line_endings(self, tmp_path):
        path = tmp_path / "Eagles.txt"
        path.write_bytes((COACH_LINE + "\r\n" + WRESTLER_LINE + "\r\n").encode("utf-8"))

        result = self.roster_file.load(path)

        assert not result.has_errors
        assert result.team.members_of_kind(MemberKind.WRESTLER)[0].uniform_signed_out is True

    def test_missing_file(self, tmp_path):
        result = self.roster_file.load(tmp_path / "Nope.txt")

        assert not result.success
        assert result.team is None
        assert isinstance(result.errors[0], RosterFileNotFoundError)
        assert "Failed to load" in result.summary()

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "Binary.txt"
        path.write_bytes(b"\xff\xfe\x00Coach")

        result = self.roster_file.load(path)

        assert result.team is None
        assert isinstance(result.errors[0], RosterFileError)
