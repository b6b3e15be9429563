"""BaseService — shared foundation for tsbridge services.

Every service receives a :class:`Clock` at construction time; that is the
only source of "now" a service may use.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tsbridge.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tsbridge.domain.errors import TsBridgeError
    from tsbridge.infrastructure.clock import Clock

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RoundTripService(BaseService):
            def demo(self) -> ServiceResult:
                instant = self._clock.now()
                ...
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    @staticmethod
    def _failure(op: str, exc: TsBridgeError) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc.code, exc_info=exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
        )
