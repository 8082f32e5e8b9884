"""
Text codec for roster member records.

A record is a type tag followed by the member's field values in the order
given by the member class's field descriptors:

    Coach,<last>,<first>,<gender>,<school>,<years>,<coach type>
    Wrestler,<last>,<first>,<gender>,<school>,<years>,<birthdate>,<weight>,
        <weight category>,<wins>,<losses>,<total points>,<wins by pin>,<status>,<uniform>

Values are not quoted or escaped, so text fields may not contain commas.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from core.exceptions import MemberParseError, UnknownMemberTypeError, ValidationError
from core.utils import DataValidator, StringHelper
from domain.models.base import BASE_FIELDS, FieldType, Member, MemberField, MemberKind
from domain.models.weight_category import WeightCategoryTable
from domain.models.wrestler import Wrestler

FIELD_SEPARATOR = ","
DATE_FORMAT = "%m/%d/%Y"
BOOLEAN_TOKENS = {"true": True, "false": False}


class MemberCodec:
    """
    Encodes members to ordered text fields and decodes them back.
    """

    def __init__(self, weight_categories: WeightCategoryTable):
        self.weight_categories = weight_categories

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def encode(self, member: Member) -> List[str]:
        """
        Encode a member's displayable attributes in column order.

        Each value is checked against the decoder's rules, so a member that
        could not be loaded back is refused with a ValidationError.
        """
        encoded = []
        for member_field, value in member.attribute_values(self.weight_categories):
            text = self.format_value(member_field, value)
            if not member_field.derived:
                try:
                    self.parse_value(member_field, text)
                except ValueError as e:
                    raise ValidationError(field=member_field.identifier, value=text, constraint=str(e))
            encoded.append(text)

        violation = _record_violation(member)
        if violation is not None:
            identifier, value, reason = violation
            raise ValidationError(field=identifier, value=value, constraint=reason)
        return encoded

    def encode_line(self, member: Member) -> str:
        """Encode a member as a full roster line (without line terminator)."""
        return FIELD_SEPARATOR.join([MemberKind.of(member).type_tag] + self.encode(member))

    def format_value(self, member_field: MemberField, value: Any) -> str:
        """Format a single attribute value."""
        field_type = member_field.field_type

        if field_type == FieldType.TEXT:
            text = str(value)
            # Anything str.splitlines() breaks on would split the record when read back.
            if FIELD_SEPARATOR in text or "".join(text.splitlines()) != text:
                raise ValidationError(
                    field=member_field.identifier,
                    value=text,
                    constraint="roster text fields cannot contain commas or line breaks"
                )
            return text
        if field_type == FieldType.INTEGER:
            return str(int(value))
        if field_type == FieldType.FLOAT:
            return StringHelper.format_number(value)
        if field_type == FieldType.DATE:
            return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"
        if field_type == FieldType.BOOLEAN:
            return "true" if value else "false"
        if field_type == FieldType.CHOICE:
            return member_field.choices(value).value

        raise ValueError(f"Unsupported field type: {field_type}")

    # -------------------------------------------------------------------------
    # Decoding
    # -------------------------------------------------------------------------

    def decode_line(self, line: str, line_number: Optional[int] = None) -> Member:
        """Decode a full roster line."""
        type_tag, fields = split_record(line)
        return self.decode(type_tag, fields, line_number=line_number)

    def decode(self, type_tag: str, fields: Sequence[str], line_number: Optional[int] = None) -> Member:
        """
        Decode a member from its type tag and raw field values.

        Base fields are decoded first, then the kind-specific fields. Any
        failure aborts the whole record.

        Raises:
            UnknownMemberTypeError: the type tag names no member kind.
            MemberParseError: a field is missing or cannot be converted.
        """
        kind = MemberKind.from_type_tag(type_tag)
        if kind is None:
            raise UnknownMemberTypeError(
                type_tag,
                valid_tags=[member_kind.type_tag for member_kind in MemberKind],
                line_number=line_number
            )

        member_class = kind.member_class
        base_count = len(BASE_FIELDS)
        variant_fields = member_class.display_attributes()[base_count:]

        values = self._decode_fields(type_tag, BASE_FIELDS, fields, 0, line_number)
        values.update(self._decode_fields(type_tag, variant_fields, fields, base_count, line_number))

        member = member_class(**values)
        self._validate(type_tag, member, line_number)
        return member

    def _decode_fields(
        self,
        type_tag: str,
        descriptors: Sequence[MemberField],
        fields: Sequence[str],
        offset: int,
        line_number: Optional[int]
    ) -> Dict[str, Any]:
        if len(fields) < offset + len(descriptors):
            missing = descriptors[max(len(fields) - offset, 0)]
            raise MemberParseError(
                type_tag, missing.identifier, None,
                f"is missing (expected {offset + len(descriptors)} fields, got {len(fields)})",
                line_number=line_number
            )

        values = {}
        for position, member_field in enumerate(descriptors, start=offset):
            raw = fields[position]
            if member_field.derived:
                # Derived columns are informational; they are recomputed, never read.
                continue
            try:
                values[member_field.attribute] = self.parse_value(member_field, raw)
            except ValueError as e:
                raise MemberParseError(
                    type_tag, member_field.identifier, raw, str(e), line_number=line_number
                )
        return values

    def parse_value(self, member_field: MemberField, raw: str) -> Any:
        """Parse a single raw field value. Raises ValueError with a reason."""
        field_type = member_field.field_type
        name = member_field.header

        if field_type == FieldType.TEXT:
            return DataValidator.validate_non_empty(raw, name)
        if field_type == FieldType.INTEGER:
            return DataValidator.validate_non_negative_int(raw, name)
        if field_type == FieldType.FLOAT:
            return DataValidator.validate_float(raw, name)
        if field_type == FieldType.DATE:
            return _parse_date(raw, name)
        if field_type == FieldType.BOOLEAN:
            token = raw.strip().lower()
            DataValidator.validate_choice(token, BOOLEAN_TOKENS, name)
            return BOOLEAN_TOKENS[token]
        if field_type == FieldType.CHOICE:
            token = raw.strip()
            DataValidator.validate_choice(token, [choice.value for choice in member_field.choices], name)
            return member_field.choices(token)

        raise ValueError(f"unsupported field type {field_type}")

    def _validate(self, type_tag: str, member: Member, line_number: Optional[int]) -> None:
        violation = _record_violation(member)
        if violation is not None:
            identifier, value, reason = violation
            raise MemberParseError(type_tag, identifier, value, reason, line_number=line_number)


def _record_violation(member: Member) -> Optional[Tuple[str, str, str]]:
    """Cross-field rules a well-formed record must satisfy, as (field, value, reason)."""
    if not isinstance(member, Wrestler):
        return None
    if member.weight < 0:
        return "Weight", StringHelper.format_number(member.weight), "must not be negative"
    if member.wins_by_pin > member.wins:
        return "WinsByPin", str(member.wins_by_pin), f"cannot exceed wins ({member.wins})"
    return None


def _parse_date(raw: str, name: str) -> date:
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"{name} must be a date in MM/dd/yyyy format")


def split_record(line: str) -> Tuple[str, List[str]]:
    """Split a roster line into its type tag and field values."""
    parts = line.split(FIELD_SEPARATOR)
    return parts[0], parts[1:]
