from __future__ import annotations

"""
debugmsg – Parser for the --debugmsg filter expression.

Grammar (comma-separated clauses, empty clauses ignored):

    clause  := [class] sign channel
    class   := 'fixme' | 'err' | 'warn' | 'trace'
    sign    := '+' | '-'
    channel := name | 'all' | ('relay=' | 'snoop=') module (':' module)*

A clause without a class prefix edits every class. When such a clause names
the relay or snoop facility followed by '=', the module list after it
replaces the facility's include list ('+') or exclude list ('-'), and the
facility channel itself is switched on for every class.

Examples
--------
    +all,warn-heap          every message except heap warnings
    +relay=KERNEL32:USER32  relay only calls into KERNEL32 and USER32
"""

import logging
from typing import List, Optional, Sequence

from launchopts.core.errors import DebugFilterSyntaxError
from launchopts.core.interfaces.trace import TraceRegistryProtocol
from launchopts.core.models import DebugClass, DebugFilterEdit, ModuleListEdit

_FACILITIES = ("relay", "snoop")


def _find_sign(clause: str) -> int:
    pos = clause.find("+")
    if pos < 0:
        pos = clause.find("-")
    return pos


class DebugFilterParser:
    """Turn a --debugmsg argument into `DebugFilterEdit` records and apply them."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or logging.getLogger("launchopts.debugmsg")

    def parse(self, argument: str) -> List[DebugFilterEdit]:
        """Parse every clause of *argument*.

        Raises:
            DebugFilterSyntaxError: on the first malformed clause; nothing
                parsed before it is returned.
        """
        clauses = [c for c in argument.split(",") if c]
        if not clauses:
            raise DebugFilterSyntaxError(argument)
        return [self._parse_clause(argument, clause) for clause in clauses]

    def _parse_clause(self, argument: str, clause: str) -> DebugFilterEdit:
        pos = _find_sign(clause)
        if pos < 0 or pos == len(clause) - 1:
            raise DebugFilterSyntaxError(argument, clause)

        prefix, sign, channel = clause[:pos], clause[pos], clause[pos + 1:]
        enable = sign == "+"

        if prefix:
            selected = DebugClass.from_label(prefix)
            if selected is None:
                raise DebugFilterSyntaxError(argument, clause)
            return self._edit(channel, selected, enable, class_name=prefix)

        keyword = channel[:6].lower()
        if keyword[:-1] in _FACILITIES and keyword.endswith("="):
            modules = tuple(m.upper() for m in channel[6:].split(":"))
            module_list = ModuleListEdit(
                facility=keyword[:-1],  # type: ignore[arg-type]
                direction="include" if enable else "exclude",
                modules=modules,
            )
            return DebugFilterEdit(
                channel=channel[:5],
                set_classes=DebugClass.ALL,
                module_list=module_list,
            )

        return self._edit(channel, DebugClass.ALL, enable)

    @staticmethod
    def _edit(channel: str, classes: DebugClass, enable: bool, *, class_name: Optional[str] = None) -> DebugFilterEdit:
        if channel == "all":
            channel = ""
        if enable:
            return DebugFilterEdit(channel=channel, set_classes=classes, class_name=class_name)
        return DebugFilterEdit(channel=channel, clear_classes=classes, class_name=class_name)

    def apply(self, edits: Sequence[DebugFilterEdit], registry: TraceRegistryProtocol) -> None:
        """Commit parsed edits to *registry* in clause order."""
        for edit in edits:
            if edit.module_list is not None:
                ml = edit.module_list
                registry.set_module_list(ml.facility, ml.direction, ml.modules)
                self._log.debug("%s %s list: %s", ml.facility, ml.direction, ":".join(ml.modules))
            registry.add_option(edit.channel, edit.set_classes, edit.clear_classes)

    def parse_and_apply(self, argument: str, registry: TraceRegistryProtocol) -> List[DebugFilterEdit]:
        edits = self.parse(argument)
        self.apply(edits, registry)
        return edits
