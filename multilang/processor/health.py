import asyncio
from collections.abc import Awaitable, Callable, Mapping

from multilang.logging.logger import Log
from multilang.processor.exceptions import HealthCheckError
from multilang.processor.models import HealthState, HealthStatus

Probe = Callable[[], Awaitable[None]]


def aggregate_health(services: Mapping[str, bool]) -> HealthState:
    """healthy if every service is up, down if none is, degraded otherwise.

    Raises:
        HealthCheckError: if *services* is empty.
    """
    if not services:
        raise HealthCheckError("No capabilities registered for health probing")
    up = sum(1 for available in services.values() if available)
    if up == len(services):
        return HealthState.HEALTHY
    if up == 0:
        return HealthState.DOWN
    return HealthState.DEGRADED


class HealthMonitor:
    """Probes each external capability concurrently and aggregates the result."""

    def __init__(self, probes: Mapping[str, Probe], timeout_seconds: float) -> None:
        self._probes = dict(probes)
        self._timeout = timeout_seconds

    async def check(self) -> HealthStatus:
        names = list(self._probes)
        results = await asyncio.gather(*(self._probe(name) for name in names))
        services = dict(zip(names, results))
        status = HealthStatus(overall=aggregate_health(services), services=services)
        Log.info(f"Health check: {status.overall.value} {services}")
        return status

    async def _probe(self, name: str) -> bool:
        try:
            await asyncio.wait_for(self._probes[name](), timeout=self._timeout)
        except asyncio.TimeoutError:
            Log.warning(f"Health probe '{name}' timed out after {self._timeout:g}s")
            return False
        except Exception as exc:
            Log.warning(f"Health probe '{name}' failed: {exc}")
            return False
        return True
