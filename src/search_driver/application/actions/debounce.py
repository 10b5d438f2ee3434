"""Application actions – DebounceManager.

Coalesces rapid calls sharing a key: each call within *wait* seconds of the
previous one cancels it, and only the last call runs.  Debouncing needs a
running event loop; without one (or with ``wait <= 0``) calls run at once.
"""
from __future__ import annotations

import asyncio
from typing import Any, Callable

__all__ = ["DebounceManager"]


class DebounceManager:
    def __init__(self) -> None:
        self._handles: dict[str, asyncio.TimerHandle] = {}

    @property
    def pending(self) -> frozenset[str]:
        return frozenset(self._handles)

    def run_with_debounce(
        self,
        wait: float,
        key: str,
        fn: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> None:
        self.cancel(key)
        if wait <= 0:
            fn(*args, **kwargs)
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running event loop – nothing can fire later, call now
            fn(*args, **kwargs)
            return
        self._handles[key] = loop.call_later(wait, self._fire, key, fn, args, kwargs)

    def cancel(self, key: str) -> None:
        handle = self._handles.pop(key, None)
        if handle is not None:
            handle.cancel()

    def cancel_all(self) -> None:
        for key in list(self._handles):
            self.cancel(key)

    def _fire(self, key: str, fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self._handles.pop(key, None)
        fn(*args, **kwargs)
