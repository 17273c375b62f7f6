"""Date rendering at a chosen precision.

A :class:`DateRenderer` holds a proleptic (year, month, day) value plus
a precision and language, and turns it into a display string. Fields
finer than the precision are ignored; constructors zero them by
convention.

Year 0 has no decade, century or millennium identity and renders as
``"0"`` at those precisions. Negative years render by magnitude with
the language's era suffix appended.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel

from eralabel.domain.language import Language
from eralabel.domain.precision import Precision


class CalendarDate(Protocol):
    """Anything exposing integer ``year``, ``month`` and ``day``.

    :class:`datetime.date` qualifies. No calendar validation is done on
    the values read from it.
    """

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...


class DateRenderer(BaseModel):
    """Immutable (year, month, day, precision, language) value.

    Usage::

        DateRenderer.from_year_as_century(-901).render()  # "10th century BCE"
        DateRenderer.from_year(910).with_language(Language.GERMAN)
    """

    model_config = {"frozen": True}

    year: int
    month: int = 0
    day: int = 0
    precision: Precision
    language: Language = Language.ENGLISH

    # --- Construction ---

    @classmethod
    def new(
        cls, year: int, month: int, day: int, precision: Precision | int
    ) -> DateRenderer:
        """Build from all parts; *month*/*day* are ignored below their precision.

        Raises:
            InvalidPrecision: *precision* is an int outside 6..11.
        """
        if not isinstance(precision, Precision):
            precision = Precision.from_rank(precision)
        return cls(year=year, month=month, day=day, precision=precision)

    @classmethod
    def from_year_month_day(cls, year: int, month: int, day: int) -> DateRenderer:
        return cls.new(year, month, day, Precision.DAY)

    @classmethod
    def from_year_month(cls, year: int, month: int) -> DateRenderer:
        return cls.new(year, month, 0, Precision.MONTH)

    @classmethod
    def from_year(cls, year: int) -> DateRenderer:
        return cls.new(year, 0, 0, Precision.YEAR)

    @classmethod
    def from_year_as_decade(cls, year: int) -> DateRenderer:
        return cls.new(year, 0, 0, Precision.DECADE)

    @classmethod
    def from_year_as_century(cls, year: int) -> DateRenderer:
        return cls.new(year, 0, 0, Precision.CENTURY)

    @classmethod
    def from_year_as_millennium(cls, year: int) -> DateRenderer:
        return cls.new(year, 0, 0, Precision.MILLENNIUM)

    @classmethod
    def from_calendar_date(
        cls, date: CalendarDate, precision: Precision = Precision.DAY
    ) -> DateRenderer:
        """Read year/month/day off *date* and render it at *precision*."""
        return cls.new(int(date.year), int(date.month), int(date.day), precision)

    def with_language(self, language: Language) -> DateRenderer:
        """Return a copy rendered in *language*; ``self`` is unchanged."""
        return self.model_copy(update={"language": language})

    # --- Rendering ---

    def render(self) -> str:
        """Return the display string for this value at its precision."""
        if self.precision is Precision.DAY:
            return f"{self.year}-{self.month:02d}-{self.day:02d}"
        if self.precision is Precision.MONTH:
            return f"{self.year}-{self.month:02d}"
        if self.precision is Precision.YEAR:
            return f"{self.year}"
        if self.precision is Precision.DECADE:
            return self._decade()
        if self.precision is Precision.CENTURY:
            return self._century()
        return self._millennium()

    def _decade(self) -> str:
        if self.year == 0:
            return "0"
        start = abs(self.year) // 10 * 10
        return f"{start}{self.language.decade_fragment()}{self._era()}"

    def _century(self) -> str:
        if self.year == 0:
            return "0"
        number = (abs(self.year) + 99) // 100
        ext = self.language.ordinal_extension(number)
        return f"{number}{ext} {self.language.century_fragment()}{self._era()}"

    def _millennium(self) -> str:
        if self.year == 0:
            return "0"
        number = (abs(self.year) + 999) // 1000
        ext = self.language.ordinal_extension(number)
        return f"{number}{ext} {self.language.millennium_fragment()}{self._era()}"

    def _era(self) -> str:
        return self.language.era_suffix(self.year)

    def __str__(self) -> str:
        return self.render()


# Era-oriented name for the same renderer.
Era = DateRenderer
