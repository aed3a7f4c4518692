"""
Declarative index definitions.

An IndexDefinition accumulates the fields, name and creation flags of a
secondary index and renders them into the two documents a MongoDB driver
expects: the key pattern and the options document.

This module is part of MDB_INDEX.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from bson.son import SON
from pymongo import IndexModel

from ..config import IndexConfig
from ..constants import (
    ASCENDING_VALUE,
    DEFAULT_BACKGROUND,
    DEFAULT_INCLUDE_DROP_DUPS,
    DESCENDING_VALUE,
    MIN_TTL_SECONDS,
    OPTION_BACKGROUND,
    OPTION_DROP_DUPS,
    OPTION_EXPIRE_AFTER_SECONDS,
    OPTION_NAME,
    OPTION_PARTIAL_FILTER_EXPRESSION,
    OPTION_SPARSE,
    OPTION_UNIQUE,
)
from ..exceptions import InvalidArgumentError
from .filters import IndexFilter, PartialIndexFilter
from .time_units import TimeUnit

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Sort direction of an indexed field."""

    ASCENDING = ASCENDING_VALUE
    DESCENDING = DESCENDING_VALUE

    @classmethod
    def from_value(cls, value: Any) -> "Direction":
        """
        Resolve a Direction from an instance, 1 / -1, or "asc" / "desc".

        Raises:
            InvalidArgumentError: If value names no direction
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in ("asc", "ascending"):
                return cls.ASCENDING
            if normalized in ("desc", "descending"):
                return cls.DESCENDING
        elif isinstance(value, int) and not isinstance(value, bool):
            if value == ASCENDING_VALUE:
                return cls.ASCENDING
            if value == DESCENDING_VALUE:
                return cls.DESCENDING
        raise InvalidArgumentError(
            f"Unknown index direction {value!r}. Expected ascending (1) or descending (-1)",
            argument="direction",
            value=value,
        )


class Duplicates(Enum):
    """What a unique index build does with existing duplicate values."""

    RETAIN = "retain"
    # dropDups was removed in MongoDB 2.8; modern servers ignore or reject it
    DROP = "drop"


class IndexDefinition:
    """
    Fluent builder for a secondary index.

    Every mutator returns the definition itself so calls can be chained:

        definition = (
            IndexDefinition("email", Direction.ASCENDING)
            .mark_unique()
            .mark_sparse()
        )
        definition.render_key_pattern()  # SON([('email', 1)])
        definition.render_options()      # SON([('unique', True), ('sparse', True)])

    Rendering never mutates the definition; it can be rendered any number of
    times and mutated again afterwards. Instances are not thread safe.
    """

    def __init__(self, key: Optional[str] = None, direction: Any = Direction.ASCENDING):
        self._fields: dict[str, Direction] = {}
        self.name: Optional[str] = None
        self.unique = False
        self.drop_duplicates = False
        self.sparse = False
        self.background = False
        self.expire_after_seconds: Optional[int] = None
        self.partial_filter: Optional[IndexFilter] = None

        if key is not None:
            self.add_field(key, direction)

    @property
    def fields(self) -> dict[str, Direction]:
        """Copy of the indexed fields, in key pattern order."""
        return dict(self._fields)

    def add_field(self, name: str, direction: Any = Direction.ASCENDING) -> "IndexDefinition":
        """
        Add a field to the index, or change the direction of an existing one.

        A field that is already present keeps its position.
        """
        self._fields[name] = Direction.from_value(direction)
        return self

    def with_name(self, name: Optional[str]) -> "IndexDefinition":
        """Name the index. A blank name leaves naming to the server."""
        self.name = name
        return self

    def mark_unique(self, duplicates: Duplicates = Duplicates.RETAIN) -> "IndexDefinition":
        """
        Reject documents that duplicate an existing value of the indexed fields.

        Args:
            duplicates: Duplicates.DROP additionally renders the legacy dropDups
                option, which only pre-2.8 servers honour
        """
        if duplicates is Duplicates.DROP:
            logger.debug("Legacy dropDups requested; servers since MongoDB 2.8 ignore it.")
            self.drop_duplicates = True
        self.unique = True
        return self

    def mark_sparse(self) -> "IndexDefinition":
        """Skip documents that lack the indexed field."""
        self.sparse = True
        return self

    def mark_background(self) -> "IndexDefinition":
        """Build the index without blocking other operations on the collection."""
        self.background = True
        return self

    def expire_after(
        self, duration: int | float, unit: Optional[TimeUnit | str]
    ) -> "IndexDefinition":
        """
        Make this a TTL index.

        Args:
            duration: Lifetime of a document, expressed in unit
            unit: TimeUnit (or its name) the duration is expressed in

        Raises:
            InvalidArgumentError: If unit is missing or unknown. The definition
                is left unchanged.
        """
        if unit is None:
            raise InvalidArgumentError(
                "TimeUnit for expiration must not be None", argument="unit"
            )
        resolved = TimeUnit.from_value(unit)
        self.expire_after_seconds = resolved.to_seconds(duration)
        logger.debug(
            f"TTL set to {duration} {resolved.value} "
            f"(expireAfterSeconds={self.expire_after_seconds})"
        )
        return self

    def expire(self, seconds: int) -> "IndexDefinition":
        """Make this a TTL index expiring documents after the given seconds."""
        return self.expire_after(seconds, TimeUnit.SECONDS)

    def with_partial_filter(self, filter_expression: Any) -> "IndexDefinition":
        """
        Only index documents matching filter_expression.

        Accepts an IndexFilter, a plain filter document, or an object exposing
        to_document(). None or an empty document clears a previously set filter.

        Raises:
            InvalidArgumentError: If no filter document can be obtained from
                filter_expression. The definition is left unchanged.
        """
        if filter_expression is None or (
            isinstance(filter_expression, Mapping) and not filter_expression
        ):
            self.partial_filter = None
        elif isinstance(filter_expression, IndexFilter):
            self.partial_filter = filter_expression
        else:
            self.partial_filter = PartialIndexFilter.of(filter_expression)
        return self

    def render_key_pattern(self) -> SON:
        """Render the key pattern: (field, 1 | -1) in the order fields were added."""
        return SON((field, direction.value) for field, direction in self._fields.items())

    def render_options(self, config: Optional[IndexConfig] = None) -> SON:
        """
        Render the options document.

        Only options that differ from their default are present, always in
        the order name, unique, dropDups, sparse, background,
        expireAfterSeconds, partialFilterExpression.

        Args:
            config: Optional rendering configuration. Without one the legacy
                dropDups option is rendered and background is left to the
                definition.
        """
        include_drop_dups = config.include_drop_dups if config else DEFAULT_INCLUDE_DROP_DUPS
        default_background = config.default_background if config else DEFAULT_BACKGROUND

        options = SON()
        if self.name and self.name.strip():
            options[OPTION_NAME] = self.name
        if self.unique:
            options[OPTION_UNIQUE] = True
        if self.drop_duplicates and include_drop_dups:
            options[OPTION_DROP_DUPS] = True
        if self.sparse:
            options[OPTION_SPARSE] = True
        if self.background or default_background:
            options[OPTION_BACKGROUND] = True
        if self.expire_after_seconds is not None and self.expire_after_seconds >= MIN_TTL_SECONDS:
            options[OPTION_EXPIRE_AFTER_SECONDS] = self.expire_after_seconds
        if self.partial_filter is not None:
            options[OPTION_PARTIAL_FILTER_EXPRESSION] = self.partial_filter.get_filter_object()
        return options

    def to_index_model(self, config: Optional[IndexConfig] = None) -> IndexModel:
        """Build a pymongo IndexModel, e.g. for Collection.create_indexes()."""
        keys = list(self.render_key_pattern().items())
        return IndexModel(keys, **self.render_options(config))

    def describe(self) -> str:
        """Human readable summary of both rendered documents."""
        return f"Index: {dict(self.render_key_pattern())} - Options: {dict(self.render_options())}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={direction.name}" for name, direction in self._fields.items())
        return f"IndexDefinition(fields=[{fields}], options={dict(self.render_options())})"
