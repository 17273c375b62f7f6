"""ServiceResult and ServiceError: the return contract of the service layer.

Domain code raises typed exceptions; services catch the ones that mark a
bad caller input and report them here instead of propagating.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"render"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a language code fallback.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @property
    def text(self) -> str | None:
        """Rendered string of a successful render, else None."""
        if not self.ok:
            return None
        return self.data.get("text")
