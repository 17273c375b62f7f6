"""eralabel: render proleptic dates at day-through-millennium precision."""

from eralabel.domain.language import Language
from eralabel.domain.precision import InvalidPrecision, Precision
from eralabel.domain.renderer import CalendarDate, DateRenderer, Era

__version__ = "0.1.0"

__all__ = [
    "CalendarDate",
    "DateRenderer",
    "Era",
    "InvalidPrecision",
    "Language",
    "Precision",
    "__version__",
]
