"""Reader/writer lock for coroutines sharing one event loop."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class LockTimeoutError(Exception):
    """Raised when a lock could not be acquired within the timeout."""

    def __init__(self, mode: str, timeout: float) -> None:
        super().__init__(f"Unable to acquire {mode} lock within {timeout}s")
        self.mode = mode
        self.timeout = timeout


class ReadWriteLock:
    """
    Many concurrent readers or a single writer.

    Waiting writers block new readers so a steady stream of reads cannot
    starve a write. Acquisition gives up after ``timeout`` seconds with
    LockTimeoutError.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        self._timeout = timeout
        self._condition = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        try:
            await asyncio.wait_for(self._acquire_read(), self._timeout)
        except asyncio.TimeoutError as e:
            raise LockTimeoutError("read", self._timeout) from e
        try:
            yield
        finally:
            await self._release_read()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        try:
            await asyncio.wait_for(self._acquire_write(), self._timeout)
        except asyncio.TimeoutError as e:
            raise LockTimeoutError("write", self._timeout) from e
        try:
            yield
        finally:
            await self._release_write()

    async def _acquire_read(self) -> None:
        async with self._condition:
            await self._condition.wait_for(
                lambda: not self._writer and self._waiting_writers == 0,
            )
            self._readers += 1

    async def _acquire_write(self) -> None:
        async with self._condition:
            self._waiting_writers += 1
            try:
                await self._condition.wait_for(
                    lambda: not self._writer and self._readers == 0,
                )
            finally:
                self._waiting_writers -= 1
                # readers may have been held back by this writer
                self._condition.notify_all()
            self._writer = True

    async def _release_read(self) -> None:
        async with self._condition:
            self._readers -= 1
            self._condition.notify_all()

    async def _release_write(self) -> None:
        async with self._condition:
            self._writer = False
            self._condition.notify_all()
