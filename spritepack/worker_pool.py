from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class WorkerPool:
    """Bounded fan-out that drains exactly one result per submitted item.

    Results come back in submission order. The first task to fail cancels
    everything still queued and its exception is re-raised to the caller.
    """

    def __init__(self, *, max_workers: int):
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def run(self, fn: Callable[[T], R], items: Iterable[T]) -> List[R]:
        items = list(items)
        if not items:
            return []

        futures = [self._executor.submit(fn, item) for item in items]
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)

        failed = next((f for f in futures if f in done and f.exception() is not None), None)
        if failed is not None:
            for fut in pending:
                fut.cancel()
            wait(pending)
            raise failed.exception()

        return [f.result() for f in futures]

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True, cancel_futures=True)
