from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentProtocol(Protocol):
    """Process environment as seen by the inheritance bridge."""

    def get(self, name: str) -> Optional[str]:
        """Return the value of `name`, or None when unset."""
        ...

    def set(self, name: str, value: str) -> None: ...

    def unset(self, name: str) -> None: ...
