from contextlib import aclosing
from typing import AsyncIterator, Optional, TypeVar

T = TypeVar("T")


async def first(stream: AsyncIterator[T]) -> Optional[T]:
    """Return the first value emitted by ``stream`` and close it."""
    async with aclosing(stream) as values:
        async for value in values:
            return value
    return None
