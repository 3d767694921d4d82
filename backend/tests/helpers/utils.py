"""Tiny helpers shared across test modules."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, TypeVar

T = TypeVar("T")


@contextmanager
def not_raises(exception: type[BaseException]):
    """Context manager asserting that an exception is *not* raised.

    Parameters
    ----------
    exception: type[BaseException]
        Exception type that should not be raised within the context.
    """
    try:
        yield
    except exception as exc:  # pragma: no cover
        raise AssertionError(f"Did raise {exception}: {exc}") from exc


def run_concurrently(fn: Callable[[Any], T], args: Iterable[Any], *, workers: int = 32) -> list[T]:
    """Call ``fn`` for every item of ``args`` from a thread pool.

    Results are returned in submission order; the first exception raised by
    any call propagates.
    """
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(fn, arg) for arg in args]
        return [f.result() for f in futures]
