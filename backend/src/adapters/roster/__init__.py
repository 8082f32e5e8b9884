"""
Roster file adapter: member record codec and whole-file load/save.
"""

from .member_codec import MemberCodec, FIELD_SEPARATOR, DATE_FORMAT, split_record
from .roster_file import RosterFile, RosterLoadResult

__all__ = [
    "MemberCodec",
    "FIELD_SEPARATOR",
    "DATE_FORMAT",
    "split_record",
    "RosterFile",
    "RosterLoadResult",
]
