from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

Facility = Literal['relay', 'snoop']
Direction = Literal['include', 'exclude']


class DebugClass(enum.Flag):
    """Trace message classes toggled by --debugmsg."""

    NONE = 0
    FIXME = 1
    ERR = 2
    WARN = 4
    TRACE = 8
    ALL = FIXME | ERR | WARN | TRACE

    @property
    def label(self) -> str:
        return (self.name or '').lower()

    @classmethod
    def from_label(cls, label: str) -> Optional['DebugClass']:
        """Return the single class named exactly *label* (case-sensitive)."""
        for member in DEBUG_CLASSES:
            if member.label == label:
                return member
        return None


# Declaration order; also the order used when listing classes to the user.
DEBUG_CLASSES: Tuple[DebugClass, ...] = (
    DebugClass.FIXME,
    DebugClass.ERR,
    DebugClass.WARN,
    DebugClass.TRACE,
)


@dataclass(frozen=True)
class ModuleListEdit:
    """Replacement of one relay/snoop include or exclude module list."""
    facility: Facility
    direction: Direction
    modules: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DebugFilterEdit:
    """One parsed --debugmsg clause."""
    channel: str
    set_classes: DebugClass = DebugClass.NONE
    clear_classes: DebugClass = DebugClass.NONE
    class_name: Optional[str] = None
    module_list: Optional[ModuleListEdit] = None


@dataclass
class LauncherOptions:
    """Launcher-wide settings produced by the option effects."""
    managed: bool = False
    dll_overrides: List[str] = field(default_factory=list)
    dos_version: Optional[str] = None
    win_version: Optional[str] = None
