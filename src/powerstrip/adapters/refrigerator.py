"""Outlet adapter for refrigerators."""

import structlog

from powerstrip.devices import Refrigerator
from powerstrip.outlet import Outlet

logger = structlog.get_logger()


class RefrigeratorAdapter(Outlet):
    """Adapter that starts a refrigerator's cooling cycle when plugged in."""

    def __init__(self, refrigerator: Refrigerator) -> None:
        self._refrigerator = refrigerator

    @property
    def device(self) -> Refrigerator:
        """Return the wrapped refrigerator."""
        return self._refrigerator

    def plug_in(self) -> str:
        status = self._refrigerator.start_cooling()
        logger.debug("outlet_plugged_in", device="refrigerator", status=status)
        return status
