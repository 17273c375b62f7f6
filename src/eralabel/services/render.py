"""RenderService: validated rendering for callers holding raw values.

Accepts precision as a member, a numeric rank, or a name, and language
as a member or a code. Out-of-range precision is reported as an
``INVALID_PRECISION`` error; unknown language codes fall back to the
English default with a warning.
"""

from __future__ import annotations

import logging
import re

from eralabel.config.settings import EraLabelSettings
from eralabel.domain.language import Language
from eralabel.domain.precision import InvalidPrecision, Precision
from eralabel.domain.renderer import CalendarDate, DateRenderer
from eralabel.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

PrecisionLike = Precision | int | str
LanguageLike = Language | str | None

_RANK_PATTERN = re.compile(r"-?\d+", re.ASCII)


def coerce_precision(value: PrecisionLike) -> Precision:
    """Resolve a member, rank, or name into a :class:`Precision`.

    Raises:
        InvalidPrecision: *value* names no precision.
    """
    if isinstance(value, Precision):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if _RANK_PATTERN.fullmatch(stripped):
            return Precision.from_rank(int(stripped))
        return Precision.from_name(stripped)
    return Precision.from_rank(value)


class RenderService:
    """Render dates and report the outcome as a :class:`ServiceResult`.

    Usage::

        result = RenderService().render(-901, precision=7, language="de")
        result.text  # "10. Jahrhundert v.Chr."
    """

    def __init__(self, settings: EraLabelSettings | None = None) -> None:
        self._settings = settings or EraLabelSettings()

    @property
    def settings(self) -> EraLabelSettings:
        return self._settings

    def render(
        self,
        year: int,
        *,
        month: int = 0,
        day: int = 0,
        precision: PrecisionLike = Precision.DAY,
        language: LanguageLike = None,
    ) -> ServiceResult:
        """Render a raw (year, month, day) at *precision*."""
        op = "render"
        try:
            resolved = coerce_precision(precision)
        except InvalidPrecision as exc:
            return self._invalid_precision(op, exc)
        renderer = DateRenderer.new(year, month, day, resolved)
        return self._finish(op, renderer, language)

    def render_date(
        self,
        date: CalendarDate,
        precision: PrecisionLike = Precision.DAY,
        language: LanguageLike = None,
    ) -> ServiceResult:
        """Render an external calendar date at *precision*."""
        op = "render_date"
        try:
            resolved = coerce_precision(precision)
        except InvalidPrecision as exc:
            return self._invalid_precision(op, exc)
        renderer = DateRenderer.from_calendar_date(date, resolved)
        return self._finish(op, renderer, language)

    # --- Internal helpers ---

    def _resolve_language(self, value: LanguageLike, warnings: list[str]) -> Language:
        if value is None:
            return self._settings.default_language
        if isinstance(value, Language):
            return value
        language = Language.from_code(value)
        code = value.strip().lower()
        if code and code != language.to_code():
            warnings.append(f"Unknown language code {value!r}; using {language.to_code()!r}")
        return language

    def _finish(
        self, op: str, renderer: DateRenderer, language: LanguageLike
    ) -> ServiceResult:
        warnings: list[str] = []
        renderer = renderer.with_language(self._resolve_language(language, warnings))
        text = renderer.render()
        logger.debug(
            "Rendered year %d at precision %s (%s): %s",
            renderer.year,
            renderer.precision.name.lower(),
            renderer.language.to_code(),
            text,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": text,
                "year": renderer.year,
                "precision": renderer.precision.rank,
                "language": renderer.language.to_code(),
            },
            warnings=warnings,
        )

    @staticmethod
    def _invalid_precision(op: str, exc: InvalidPrecision) -> ServiceResult:
        logger.debug("Rejected precision %r", exc.value)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="INVALID_PRECISION",
                message=str(exc),
                detail={"value": exc.value},
            ),
        )
