"""
Time units for TTL index expiry.

Conversions produce whole seconds, truncating toward zero after the
conversion: 1500 milliseconds is 1 second, -1500 milliseconds is -1 second
and 1.5 hours is 5400 seconds.
"""

from enum import Enum
from fractions import Fraction

from ..exceptions import InvalidArgumentError

# Length of one unit, as a (numerator, denominator) fraction of a second
_SECONDS_PER_UNIT: dict[str, tuple[int, int]] = {
    "NANOSECONDS": (1, 1_000_000_000),
    "MICROSECONDS": (1, 1_000_000),
    "MILLISECONDS": (1, 1_000),
    "SECONDS": (1, 1),
    "MINUTES": (60, 1),
    "HOURS": (3_600, 1),
    "DAYS": (86_400, 1),
}


class TimeUnit(str, Enum):
    """Granularity of a duration passed to IndexDefinition.expire_after."""

    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    def to_seconds(self, value: int | float) -> int:
        """
        Convert a duration in this unit to whole seconds.

        Args:
            value: Duration expressed in this unit

        Returns:
            Whole seconds, truncated toward zero

        Raises:
            InvalidArgumentError: If value is not a number
        """
        numerator, denominator = _SECONDS_PER_UNIT[self.name]
        try:
            duration = Fraction(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidArgumentError(
                f"Duration must be a number, got {value!r}", argument="duration", value=value
            ) from e
        # int() truncates toward zero
        return int(duration * numerator / denominator)

    @classmethod
    def from_value(cls, value: "TimeUnit | str") -> "TimeUnit":
        """
        Resolve a TimeUnit from an instance or a case-insensitive name.

        Raises:
            InvalidArgumentError: If the name is not a known unit
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for unit in cls:
                if unit.value == normalized:
                    return unit
        raise InvalidArgumentError(
            f"Unknown time unit {value!r}. "
            f"Expected one of: {', '.join(unit.value for unit in cls)}",
            argument="unit",
            value=value,
        )
