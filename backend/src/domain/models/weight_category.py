"""
Weight category classification for wrestlers.

A WeightCategoryTable maps each gender to an ascending set of weight
thresholds. It is built once at startup from the weight category resource
and handed to whatever needs to classify wrestlers.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ConfigurationError
from core.utils import LoggerFactory
from .base import Gender

logger = LoggerFactory.get_logger(__name__)


class WeightCategoryCollection(BaseModel):
    """A discrete collection of weight categories for one gender."""
    model_config = ConfigDict(populate_by_name=True)

    gender: Gender = Field(alias="Gender")
    weights: List[float] = Field(alias="Weights")


_COLLECTIONS_ADAPTER = TypeAdapter(List[WeightCategoryCollection])


class WeightCategoryTable:
    """
    Immutable gender-partitioned weight category thresholds.
    """

    def __init__(self, categories: Mapping[Gender, Iterable[float]]):
        table: Dict[Gender, Tuple[float, ...]] = {}
        for gender, weights in categories.items():
            thresholds = tuple(sorted(set(float(weight) for weight in weights)))
            if not thresholds:
                raise ConfigurationError(
                    "weight_categories",
                    f"no weight categories defined for gender '{Gender(gender).value}'"
                )
            table[Gender(gender)] = thresholds
        self._table = table

    @classmethod
    def from_collections(
        cls,
        collections: Iterable[WeightCategoryCollection],
        require_all_genders: bool = True
    ) -> 'WeightCategoryTable':
        """Build a table, merging collections that share a gender."""
        merged: Dict[Gender, List[float]] = {}
        for collection in collections:
            merged.setdefault(collection.gender, []).extend(collection.weights)

        if require_all_genders:
            missing = [gender.value for gender in Gender if gender not in merged]
            if missing:
                raise ConfigurationError(
                    "weight_categories",
                    f"missing weight categories for: {', '.join(missing)}"
                )

        return cls(merged)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'WeightCategoryTable':
        """
        Load the weight category resource.

        Raises:
            ConfigurationError: if the file is missing, is not valid JSON, does not
                match the expected shape, or leaves a gender without categories.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as resource:
                raw = json.load(resource)
        except FileNotFoundError as e:
            raise ConfigurationError(
                "weight_categories_path", f"weight category file not found: {path}", original_error=e
            )
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                "weight_categories_path", f"could not read weight categories from {path}: {e}", original_error=e
            )

        try:
            collections = _COLLECTIONS_ADAPTER.validate_python(raw)
        except PydanticValidationError as e:
            raise ConfigurationError(
                "weight_categories_path", f"malformed weight categories in {path}: {e}", original_error=e
            )

        table = cls.from_collections(collections)
        logger.debug(f"Loaded weight categories from {path}")
        return table

    @property
    def genders(self) -> List[Gender]:
        return list(self._table)

    def thresholds(self, gender: Gender) -> Tuple[float, ...]:
        """Get the ascending thresholds for a gender."""
        try:
            return self._table[Gender(gender)]
        except KeyError:
            raise ConfigurationError(
                "weight_categories",
                f"no weight categories defined for gender '{Gender(gender).value}'"
            )

    def classify(self, gender: Gender, weight: float) -> float:
        """
        Map a weight to its weight category.

        The category is the lightest threshold the weight does not exceed;
        weights above every threshold fall into the heaviest category.
        """
        thresholds = self.thresholds(gender)
        for threshold in thresholds:
            if weight <= threshold:
                return threshold
        return thresholds[-1]

    def all_categories(self) -> List[float]:
        """Get every distinct category across all genders, ascending."""
        return sorted({threshold for thresholds in self._table.values() for threshold in thresholds})

    def to_dict(self) -> Dict[str, List[float]]:
        return {gender.value: list(thresholds) for gender, thresholds in self._table.items()}

    def __repr__(self) -> str:
        return f"WeightCategoryTable({self.to_dict()!r})"
