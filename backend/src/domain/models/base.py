"""
Base domain models shared by every roster member.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type, TYPE_CHECKING

from core.utils import StringHelper

if TYPE_CHECKING:
    from .weight_category import WeightCategoryTable


class Gender(str, Enum):
    """The gender of a member. Values are the serialized tokens."""
    MALE = "Male"
    FEMALE = "Female"


class MemberKind(str, Enum):
    """
    The concrete kind of a member.
    Values double as the type tags written at the start of each roster line.
    """
    COACH = "Coach"
    WRESTLER = "Wrestler"

    @property
    def type_tag(self) -> str:
        return self.value

    @property
    def member_class(self) -> Type['Member']:
        """Get the member class for this kind."""
        from .coach import Coach
        from .wrestler import Wrestler

        classes = {
            MemberKind.COACH: Coach,
            MemberKind.WRESTLER: Wrestler,
        }
        return classes[self]

    @property
    def plural(self) -> str:
        return _PLURALS[self]

    @classmethod
    def of(cls, member: 'Member') -> 'MemberKind':
        """Get the kind of a member instance."""
        return member.kind

    @classmethod
    def from_type_tag(cls, type_tag: str) -> Optional['MemberKind']:
        """Look up a kind by its type tag, or None for unknown tags."""
        try:
            return cls(type_tag)
        except ValueError:
            return None


_PLURALS = {
    MemberKind.COACH: "Coaches",
    MemberKind.WRESTLER: "Wrestlers",
}


class FieldType(str, Enum):
    """Value types a member field can carry."""
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    DATE = "date"
    BOOLEAN = "boolean"
    CHOICE = "choice"


@dataclass(frozen=True)
class MemberField:
    """
    Static descriptor of one displayable member attribute.

    The ordered tuple of descriptors on each member class drives both the
    roster file layout and the column order of any roster view.
    """
    attribute: str
    identifier: str
    order: int
    field_type: FieldType
    choices: Optional[Type[Enum]] = None
    derived: bool = False

    @property
    def header(self) -> str:
        """Display label, e.g. 'Years Of Experience'."""
        return StringHelper.to_display_header(self.identifier)


BASE_FIELDS: Tuple[MemberField, ...] = (
    MemberField("last_name", "LastName", 0, FieldType.TEXT),
    MemberField("first_name", "FirstName", 1, FieldType.TEXT),
    MemberField("gender", "Gender", 2, FieldType.CHOICE, choices=Gender),
    MemberField("school", "School", 3, FieldType.TEXT),
    MemberField("years_of_experience", "YearsOfExperience", 4, FieldType.INTEGER),
)


@dataclass
class Member(ABC):
    """
    Base roster entry. Concrete kinds are Coach and Wrestler; the base
    itself cannot be instantiated.
    """
    first_name: str = ""
    last_name: str = ""
    gender: Gender = Gender.MALE
    school: str = ""
    years_of_experience: int = 0

    FIELDS: ClassVar[Tuple[MemberField, ...]] = BASE_FIELDS

    def __post_init__(self):
        """Post-initialization normalization."""
        if isinstance(self.gender, str) and not isinstance(self.gender, Gender):
            self.gender = Gender(self.gender)

    @property
    @abstractmethod
    def kind(self) -> MemberKind:
        """The concrete kind of this member."""

    @property
    def full_name(self) -> str:
        """Get the member's full name."""
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def display_attributes(cls) -> List[MemberField]:
        """Get the displayable attributes of this kind in column order."""
        return sorted(cls.FIELDS, key=lambda member_field: member_field.order)

    @classmethod
    def from_member(cls, other: 'Member') -> 'Member':
        """
        Create a member of this kind from another member.
        Shared base fields are copied; kind-specific fields take their defaults.
        """
        return cls(**other.base_values())

    def base_values(self) -> Dict[str, Any]:
        """Get the shared base attributes as keyword arguments."""
        return {
            base_field.name: getattr(self, base_field.name)
            for base_field in fields(Member)
        }

    def attribute_value(
        self,
        member_field: MemberField,
        weight_categories: Optional['WeightCategoryTable'] = None
    ) -> Any:
        """Get the current value of a displayable attribute."""
        return getattr(self, member_field.attribute)

    def attribute_values(
        self,
        weight_categories: Optional['WeightCategoryTable'] = None
    ) -> List[Tuple[MemberField, Any]]:
        """Get every displayable attribute paired with its value, in column order."""
        return [
            (member_field, self.attribute_value(member_field, weight_categories))
            for member_field in self.display_attributes()
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert member to dictionary representation."""
        result = {'kind': self.kind.value}
        for key, value in self.__dict__.items():
            if isinstance(value, Enum):
                result[key] = value.value
            elif hasattr(value, 'isoformat'):
                result[key] = value.isoformat()
            else:
                result[key] = value
        return result
