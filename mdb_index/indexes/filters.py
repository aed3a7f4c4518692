"""
Partial index filters.

A partial index only covers documents matching a filter expression. The
expression itself is opaque here: whatever document the caller supplies is
handed to the driver untouched.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ..exceptions import InvalidArgumentError


@runtime_checkable
class IndexFilter(Protocol):
    """Anything that can expose the document backing a partial index filter."""

    def get_filter_object(self) -> Mapping[str, Any]:
        ...


class PartialIndexFilter:
    """
    IndexFilter backed by a plain filter document.

    The document is held by reference, so later changes to it by the caller
    show up in subsequent renders.

    Example:
        index_filter = PartialIndexFilter.of({"status": {"$eq": "active"}})
        definition.with_partial_filter(index_filter)
    """

    def __init__(self, filter_expression: Mapping[str, Any]):
        self._filter_expression = filter_expression

    @classmethod
    def of(cls, expression: Any) -> "PartialIndexFilter":
        """
        Wrap a filter expression.

        Args:
            expression: A filter document, or an object exposing
                get_filter_object() or to_document()

        Returns:
            PartialIndexFilter over the underlying document

        Raises:
            InvalidArgumentError: If no document can be obtained from expression
        """
        if isinstance(expression, Mapping):
            return cls(expression)
        if isinstance(expression, IndexFilter):
            return cls(expression.get_filter_object())
        to_document = getattr(expression, "to_document", None)
        if callable(to_document):
            return cls(to_document())
        raise InvalidArgumentError(
            f"Cannot build a partial index filter from {type(expression).__name__}",
            argument="expression",
            value=expression,
        )

    def get_filter_object(self) -> Mapping[str, Any]:
        return self._filter_expression

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartialIndexFilter):
            return NotImplemented
        return self._filter_expression == other._filter_expression

    def __repr__(self) -> str:
        return f"PartialIndexFilter({self._filter_expression!r})"
