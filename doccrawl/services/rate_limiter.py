import asyncio
from typing import Awaitable, Callable

from doccrawl.config import REQUEST_DELAY


class RateLimiter:
    """Fixed pause between consecutive requests to the documentation origin."""

    def __init__(
        self,
        delay: float = REQUEST_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.delay = delay
        self._sleep = sleep

    async def wait(self) -> None:
        """Suspend the pipeline for ``delay`` seconds."""
        await self._sleep(self.delay)
