from typing import Awaitable, Callable, Iterable, TypeVar

T = TypeVar("T")


async def async_for_each(
    items: Iterable[T], action: Callable[[T], Awaitable[None]]
) -> None:
    """Await ``action`` on each item in order, one at a time.

    Used where per-item side effects (script writes, console output) must
    not interleave.
    """
    for item in items:
        await action(item)
