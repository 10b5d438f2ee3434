"""A11yNotifier port – announces messages to assistive technology."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class A11yNotifier(Protocol):
    def announce(self, message: str) -> None: ...


__all__ = ["A11yNotifier"]
