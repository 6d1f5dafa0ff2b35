# controller.py
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from jsonplaceholder.client import FetchError

logger = logging.getLogger(__name__)

Fetcher = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class ResourceState:
    """The {data, isLoading, error} record a screen renders from."""
    data: Optional[Dict[str, Any]] = None
    is_loading: bool = True
    error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.is_loading:
            return "loading"
        return "failure" if self.error is not None else "success"

    def to_dict(self) -> Dict[str, Any]:
        data = None
        if self.data is not None:
            data = {name: _dump(value) for name, value in self.data.items()}
        return {"data": data, "isLoading": self.is_loading, "error": self.error, "status": self.status}


def _dump(value: Any) -> Any:
    if isinstance(value, list):
        return [_dump(item) for item in value]
    if hasattr(value, "model_dump"):
        return value.model_dump()
    return value


class ResourceController:
    """
    Runs the fetchers of one screen for a trigger identity and resolves into
    exactly one terminal state per trigger.

    `fetchers` maps a result name to an async callable taking the identity.
    All of them run concurrently; success needs every one of them. Each cycle
    is tagged with a generation number and only the newest generation may
    commit, so a slow superseded fetch can never overwrite newer state.
    """

    def __init__(self, fetchers: Mapping[str, Fetcher], name: str = "screen"):
        if not fetchers:
            raise ValueError("ResourceController needs at least one fetcher")
        self.name = name
        self._fetchers = dict(fetchers)
        self._generation = 0
        self._identity: Any = None
        self._triggered = False
        self.state = ResourceState()

    @property
    def identity(self) -> Any:
        return self._identity

    async def trigger(self, identity: Any = None) -> ResourceState:
        self._generation += 1
        generation = self._generation
        self._identity = identity
        self._triggered = True
        # Keep the previous data visible as stale while the new cycle loads.
        self.state = ResourceState(data=self.state.data, is_loading=True, error=None)
        logger.info(f"{self.name}: loading (trigger={identity!r})")

        outcomes = await asyncio.gather(
            *(fetch(identity) for fetch in self._fetchers.values()),
            return_exceptions=True,
        )

        if generation != self._generation:
            logger.debug(f"{self.name}: discarding superseded result for trigger={identity!r}")
            return self.state

        failure = next((o for o in outcomes if isinstance(o, FetchError)), None)
        if failure is not None:
            logger.warning(f"{self.name}: fetch failed for trigger={identity!r}: {failure.message}")
            self.state = ResourceState(data=None, is_loading=False, error=failure.message)
            return self.state

        unexpected = next((o for o in outcomes if isinstance(o, BaseException)), None)
        if unexpected is not None:
            raise unexpected

        self.state = ResourceState(data=dict(zip(self._fetchers, outcomes)), is_loading=False)
        logger.info(f"{self.name}: loaded (trigger={identity!r})")
        return self.state

    async def retry(self) -> ResourceState:
        """Re-runs the identical fetch. No backoff and no cap."""
        if not self._triggered:
            raise RuntimeError(f"{self.name}: retry() called before any trigger")
        return await self.trigger(self._identity)
