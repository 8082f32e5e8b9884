"""
Whole-file loading and saving of team rosters.

Loading is tolerant: a bad line is logged and skipped, and the team built
from the remaining lines is still returned together with the error tally.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from core.error_handler import error_handler
from core.exceptions import (
    ErrorContext, MemberParseError, RosterException, RosterFileError,
    RosterFileNotFoundError, UnknownMemberTypeError
)
from core.utils import LoggerFactory
from domain.models.base import MemberKind
from domain.models.team import Team

from .member_codec import MemberCodec

logger = LoggerFactory.get_logger(__name__)

PathLike = Union[str, Path]


@dataclass
class RosterLoadResult:
    """Outcome of loading a roster file."""
    filepath: str
    team: Optional[Team] = None
    errors: List[RosterException] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when the file existed and a team was produced."""
        return self.team is not None

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def summary(self) -> str:
        if self.team is None:
            return f"Failed to load roster from {self.filepath}"
        return (
            f"Loaded {self.team.total_members} member(s) for team '{self.team.name}' "
            f"with {self.error_count} error(s)"
        )


class RosterFile:
    """
    Reads and writes roster files, one member record per line.
    """

    def __init__(self, codec: MemberCodec, encoding: str = "utf-8"):
        self.codec = codec
        self.encoding = encoding

    def load(self, filepath: PathLike) -> RosterLoadResult:
        """
        Load a team from a roster file.

        Never raises for file or record problems: a missing or unreadable file
        yields a result without a team, and bad lines are collected as errors.
        """
        path = Path(filepath)
        result = RosterLoadResult(filepath=str(path))

        if not path.is_file():
            error = RosterFileNotFoundError(str(path), context=ErrorContext(operation="load roster", filepath=str(path)))
            logger.error(f"Failed to load team: {error}")
            result.errors.append(error)
            return result

        try:
            lines = self._read_lines(path)
        except RosterFileError as e:
            logger.error(f"Failed to load team: {e}")
            result.errors.append(e)
            return result

        team = Team(name=Team.name_from_filepath(str(path)), filepath=str(path))

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue

            try:
                member = self.codec.decode_line(line, line_number=line_number)
            except UnknownMemberTypeError as e:
                logger.warning(f"{path}:{line_number}: {e.message}; skipping line")
                result.errors.append(e)
                continue
            except MemberParseError as e:
                logger.error(f"{path}:{line_number}: {e.message}; skipping line")
                result.errors.append(e)
                continue

            team.add_member(MemberKind.of(member), member)

        if result.has_errors:
            logger.warning(
                f"Team '{team.name}' loaded from {path} with {result.error_count} error(s)"
            )
        else:
            logger.info(f"Team '{team.name}' loaded from {path} ({team.total_members} members)")

        result.team = team
        return result

    @error_handler.with_error_context("save roster", filepath_arg="filepath")
    def save(self, team: Team, filepath: Optional[PathLike] = None) -> Path:
        """
        Write a team to its roster file, one line per member.

        Every record is encoded before the file is opened, so a member that
        cannot be written leaves the existing file untouched.
        """
        target = filepath if filepath is not None else team.filepath
        if target is None:
            raise RosterFileError(None, f"team '{team.name}' has no file path")

        path = Path(target)
        lines = [self.codec.encode_line(member) for _, member in team.iter_members()]

        with open(path, "w", encoding=self.encoding, newline="\n") as roster:
            for line in lines:
                roster.write(line + "\n")

        team.filepath = str(path)
        logger.info(f"Saved team '{team.name}' to {path} ({len(lines)} members)")
        return path

    @error_handler.with_error_context("read roster", filepath_arg="filepath")
    def _read_lines(self, filepath: Path) -> List[str]:
        try:
            with open(filepath, "r", encoding=self.encoding) as roster:
                return roster.read().splitlines()
        except UnicodeDecodeError as e:
            raise RosterFileError(str(filepath), f"not a {self.encoding} text file", original_error=e)
