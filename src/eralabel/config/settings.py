"""Runtime settings for eralabel.

Priority chain (highest to lowest):
  1. Init kwargs, values passed by the embedding application
  2. Env vars with the ``ERALABEL_`` prefix
  3. Code defaults

Uses Pydantic Settings v2. The language code is stored as given and
resolved through :meth:`Language.from_code`, so an unrecognized code
falls back to English rather than failing validation.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings

from eralabel.domain.language import Language


class EraLabelSettings(BaseSettings):
    """Unified settings, frozen after construction.

    Attributes:
        language: Default language code for renders that do not pick one.
        verbose: Enable DEBUG logging for the ``eralabel`` logger.
        log_json: Emit JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ERALABEL_",
    }

    language: str = "en"
    verbose: bool = False
    log_json: bool = False

    @property
    def default_language(self) -> Language:
        return Language.from_code(self.language)

    @classmethod
    def load(cls, **overrides: Any) -> EraLabelSettings:
        """Construct settings from env vars with *overrides* taking priority.

        ``None`` overrides are dropped so unset caller options never mask
        an environment value.
        """
        return cls(**{k: v for k, v in overrides.items() if v is not None})
