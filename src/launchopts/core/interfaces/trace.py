from __future__ import annotations
from typing import Protocol, Sequence, runtime_checkable

from launchopts.core.models import DebugClass, Direction, Facility


@runtime_checkable
class TraceRegistryProtocol(Protocol):
    """Process-wide trace configuration fed by --debugmsg."""

    def add_option(self, channel: str, set_classes: DebugClass, clear_classes: DebugClass) -> None:
        """Record a class edit for `channel` ('' means every channel)."""
        ...

    def set_module_list(self, facility: Facility, direction: Direction, modules: Sequence[str]) -> None:
        """Replace the relay/snoop include or exclude module list."""
        ...
