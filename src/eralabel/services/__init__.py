"""Service layer: validated entry points returning :class:`ServiceResult`."""

from eralabel.services.render import RenderService
from eralabel.services.result import ServiceError, ServiceResult

__all__ = ["RenderService", "ServiceError", "ServiceResult"]
