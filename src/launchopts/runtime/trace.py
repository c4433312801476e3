from __future__ import annotations

"""
trace – In-process trace configuration registry.

Keeps the ordered class edits produced by --debugmsg and the relay/snoop
module filters. Channels are resolved by replaying the edits in order over
the default class set, so a later edit always wins over an earlier one.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from launchopts.core.models import DebugClass, Direction, Facility

DEFAULT_CLASSES = DebugClass.ERR | DebugClass.FIXME


@dataclass(frozen=True)
class ChannelOption:
    channel: str
    set_classes: DebugClass
    clear_classes: DebugClass

    def applies_to(self, channel: str) -> bool:
        return not self.channel or self.channel == channel


@dataclass
class DebugChannelRegistry:
    """Default `TraceRegistryProtocol` implementation."""

    default_classes: DebugClass = DEFAULT_CLASSES
    options: List[ChannelOption] = field(default_factory=list)
    module_lists: Dict[Tuple[Facility, Direction], Tuple[str, ...]] = field(default_factory=dict)
    logger: Optional[logging.Logger] = None

    def add_option(self, channel: str, set_classes: DebugClass, clear_classes: DebugClass) -> None:
        self.options.append(ChannelOption(channel, set_classes, clear_classes))
        if self.logger is not None:
            self.logger.debug(
                "trace option channel=%r set=%s clear=%s", channel or "all", set_classes, clear_classes
            )

    def set_module_list(self, facility: Facility, direction: Direction, modules: Sequence[str]) -> None:
        self.module_lists[(facility, direction)] = tuple(modules)

    def module_list(self, facility: Facility, direction: Direction) -> Optional[Tuple[str, ...]]:
        return self.module_lists.get((facility, direction))

    def classes_for(self, channel: str) -> DebugClass:
        """Return the classes enabled for `channel` after every edit."""
        flags = self.default_classes
        for opt in self.options:
            if opt.applies_to(channel):
                flags = (flags & ~opt.clear_classes) | opt.set_classes
        return flags

    def is_enabled(self, debug_class: DebugClass, channel: str) -> bool:
        return bool(self.classes_for(channel) & debug_class)

    def traces_module(self, facility: Facility, module: str) -> bool:
        """Return whether `module` passes the relay/snoop include/exclude lists.

        An include list, when present, is authoritative; otherwise the module
        is traced unless it appears in the exclude list.
        """
        name = module.upper()
        include = self.module_list(facility, "include")
        if include is not None:
            return name in include
        exclude = self.module_list(facility, "exclude")
        return exclude is None or name not in exclude
