"""Date data type."""

from datetime import UTC, date, datetime, time
from typing import Any, Self

from formstate.errors import TypeCastError
from formstate.types.base import DataType
from formstate.validation import rules


class DateType(DataType[datetime]):
    """A timezone-aware ``datetime``.

    - ``datetime`` values pass through; naive ones are taken as UTC.
    - ``date`` values become midnight UTC.
    - Numbers are milliseconds since the Unix epoch.
    - Strings are parsed as ISO 8601. A blank string is ``None``, so a
      cleared text input means "no date". Any other string that does not
      parse is a cast error rather than an "invalid date" value.
    """

    __slots__ = ()
    name = "date"

    def cast(self, value: Any) -> datetime | None:
        if value is None:
            return None
        if isinstance(value, datetime):
            return _aware(value)
        if isinstance(value, date):
            return datetime.combine(value, time(), tzinfo=UTC)
        if isinstance(value, bool):
            raise TypeCastError(value, self.name)
        if isinstance(value, int | float):
            try:
                return datetime.fromtimestamp(value / 1000, tz=UTC)
            except (OverflowError, OSError, ValueError):
                raise TypeCastError(value, self.name) from None
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            try:
                return _aware(datetime.fromisoformat(text))
            except ValueError:
                raise TypeCastError(value, self.name) from None
        raise TypeCastError(value, self.name)

    def min(self, bound: datetime | date | str | float, message: str | None = None) -> Self:
        """Dates before *bound* fail. *bound* is cast like any input."""
        return self.push(rules.min_date(self._bound(bound), message))

    def max(self, bound: datetime | date | str | float, message: str | None = None) -> Self:
        """Dates after *bound* fail. *bound* is cast like any input."""
        return self.push(rules.max_date(self._bound(bound), message))

    def _bound(self, bound: Any) -> datetime:
        cast = self.cast(bound)
        if cast is None:
            raise TypeCastError(bound, self.name, "A date bound cannot be None")
        return cast


def _aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
