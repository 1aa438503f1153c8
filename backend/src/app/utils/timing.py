"""Sleep helpers taking milliseconds, as the rest of the codebase does."""

from __future__ import annotations

import asyncio
import time


def sleep(milliseconds: float) -> None:
    time.sleep(max(milliseconds, 0) / 1000)


async def async_sleep(milliseconds: float) -> None:
    await asyncio.sleep(max(milliseconds, 0) / 1000)
