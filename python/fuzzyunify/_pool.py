"""Shared worker pool for running metrics concurrently.

The pool is created lazily on first use and reused by every call.

Environment variables:
    FUZZYUNIFY_MAX_WORKERS: Positive integer pool size. Unset means the
        ``ThreadPoolExecutor`` default.
    FUZZYUNIFY_DISABLE_THREADS: ``1``/``true``/``yes`` runs metrics inline
        on the calling thread.

Both can be overridden at runtime with :func:`configure`.
"""

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence

from fuzzyunify.exceptions import ValidationError

logger = logging.getLogger(__name__)

THREAD_NAME_PREFIX = "fuzzyunify"

_TRUTHY = ("1", "true", "yes")


class _PoolState:
    """Encapsulates pool state to avoid global variables."""

    executor: Optional[ThreadPoolExecutor] = None
    max_workers: Optional[int] = None
    threaded: Optional[bool] = None


_state = _PoolState()
_lock = threading.Lock()
_worker = threading.local()


def _max_workers_from_env() -> Optional[int]:
    raw = os.environ.get("FUZZYUNIFY_MAX_WORKERS", "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(
            f"FUZZYUNIFY_MAX_WORKERS must be a positive integer, got {raw!r}"
        ) from None
    if value < 1:
        raise ValidationError(f"FUZZYUNIFY_MAX_WORKERS must be a positive integer, got {raw!r}")
    return value


def threads_enabled() -> bool:
    """Whether metrics are dispatched to the pool rather than run inline."""
    if _state.threaded is not None:
        return _state.threaded
    return os.environ.get("FUZZYUNIFY_DISABLE_THREADS", "").lower() not in _TRUTHY


def _mark_worker() -> None:
    _worker.active = True


def in_worker_thread() -> bool:
    """True when called from one of the pool's own threads."""
    return getattr(_worker, "active", False)


def _current_executor() -> ThreadPoolExecutor:
    # Caller holds _lock
    if _state.executor is None:
        max_workers = _state.max_workers
        if max_workers is None:
            max_workers = _max_workers_from_env()
        _state.executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=THREAD_NAME_PREFIX,
            initializer=_mark_worker,
        )
        logger.debug("Created metric pool (max_workers=%s)", max_workers)
    return _state.executor


def get_executor() -> ThreadPoolExecutor:
    """Return the shared executor, creating it on first use.

    Raises:
        ValidationError: If ``FUZZYUNIFY_MAX_WORKERS`` is set to something
            other than a positive integer.
    """
    with _lock:
        return _current_executor()


def submit_all(funcs: Sequence[Callable[..., Any]], *args: Any) -> List[Future]:
    """Submit ``func(*args)`` for each function to the shared executor.

    The executor is looked up and fed under the pool lock, so a concurrent
    :func:`configure` or :func:`shutdown` cannot close it in between. Work
    already submitted still runs to completion.

    Raises:
        ValidationError: If ``FUZZYUNIFY_MAX_WORKERS`` is invalid.
    """
    with _lock:
        executor = _current_executor()
        return [executor.submit(func, *args) for func in funcs]


def configure(max_workers: Optional[int] = None, threaded: Optional[bool] = None) -> None:
    """Override pool settings at runtime.

    Any existing pool is shut down and recreated on next use.

    Args:
        max_workers: Pool size. None falls back to ``FUZZYUNIFY_MAX_WORKERS``
            or the executor default.
        threaded: False runs metrics inline, True forces the pool, None
            defers to ``FUZZYUNIFY_DISABLE_THREADS``.

    Raises:
        ValidationError: If ``max_workers`` is less than 1.
    """
    if max_workers is not None and max_workers < 1:
        raise ValidationError(f"max_workers must be at least 1, got {max_workers}")
    with _lock:
        executor, _state.executor = _state.executor, None
        _state.max_workers = max_workers
        _state.threaded = threaded
    _close(executor, wait=True)


def shutdown(wait: bool = True) -> None:
    """Shut down the shared pool. It is recreated lazily on next use."""
    with _lock:
        executor, _state.executor = _state.executor, None
    _close(executor, wait=wait)


def _close(executor: Optional[ThreadPoolExecutor], wait: bool) -> None:
    if executor is not None:
        executor.shutdown(wait=wait)
        logger.debug("Shut down metric pool")


__all__ = [
    "configure",
    "shutdown",
    "get_executor",
    "submit_all",
    "threads_enabled",
    "in_worker_thread",
]
