from __future__ import annotations

"""
table – Option registry for the launcher.

`OptionTable` is an immutable, ordered collection of `OptionSpec` entries.
Declaration order matters: the matcher returns the first entry that fits a
token. `build_default_table` wires the launcher's fixed option surface;
callers may inject their own handlers for the value options through
`LauncherHooks`.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

from launchopts.core.errors import OptionTableError
from launchopts.parsing.debugmsg import DebugFilterParser
from launchopts.parsing.effects import (
    EffectContext,
    FlagSetter,
    OptionEffect,
    TerminalAction,
    ValueForwarder,
    forward_to,
)


@dataclass(frozen=True)
class OptionSpec:
    long_name: str
    short_name: Optional[str]
    takes_argument: bool
    inheritable: bool
    effect: OptionEffect
    usage: str


class OptionTable:
    """Ordered, validated, read-only sequence of option specs."""

    def __init__(self, specs: Tuple[OptionSpec, ...]) -> None:
        seen_long: set[str] = set()
        seen_short: set[str] = set()
        for spec in specs:
            if not spec.long_name:
                raise OptionTableError("option long name must be non-empty")
            if spec.long_name in seen_long:
                raise OptionTableError(f"duplicate long option name {spec.long_name!r}")
            seen_long.add(spec.long_name)
            if spec.short_name is not None:
                if len(spec.short_name) != 1:
                    raise OptionTableError(f"short name of {spec.long_name!r} must be one character")
                if spec.short_name in seen_short:
                    raise OptionTableError(f"duplicate short option name {spec.short_name!r}")
                seen_short.add(spec.short_name)
        self._specs = tuple(specs)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def usage_lines(self) -> Tuple[str, ...]:
        return tuple(spec.usage for spec in self._specs)


@dataclass(frozen=True)
class LauncherHooks:
    """Optional external handlers for the value-forwarding options."""
    dll: Optional[Callable[[str], None]] = None
    dosver: Optional[Callable[[str], None]] = None
    winver: Optional[Callable[[str], None]] = None


def _apply_debugmsg(ctx: EffectContext, arg: str) -> None:
    DebugFilterParser(logger=ctx.logger).parse_and_apply(arg, ctx.trace)


def _add_dll_override(ctx: EffectContext, arg: str) -> None:
    ctx.options.dll_overrides.append(arg)


def _set_dos_version(ctx: EffectContext, arg: str) -> None:
    ctx.options.dos_version = arg


def _set_win_version(ctx: EffectContext, arg: str) -> None:
    ctx.options.win_version = arg


def build_default_table(hooks: Optional[LauncherHooks] = None) -> OptionTable:
    """Return the launcher's fixed option table."""
    h = hooks or LauncherHooks()
    return OptionTable((
        OptionSpec(
            "debugmsg", None, True, True, ValueForwarder(_apply_debugmsg),
            "--debugmsg name  Turn debugging-messages on or off",
        ),
        OptionSpec(
            "dll", None, True, True, forward_to(h.dll, _add_dll_override),
            "--dll name       Enable or disable built-in DLLs",
        ),
        OptionSpec(
            "dosver", None, True, True, forward_to(h.dosver, _set_dos_version),
            "--dosver x.xx    DOS version to imitate (e.g. 6.22)\n"
            "                    Only valid with --winver win31",
        ),
        OptionSpec(
            "help", "h", False, False, TerminalAction("help"),
            "--help,-h        Show this help message",
        ),
        OptionSpec(
            "managed", None, False, False, FlagSetter("managed"),
            "--managed        Allow the window manager to manage created windows",
        ),
        OptionSpec(
            "version", "v", False, False, TerminalAction("version"),
            "--version,-v     Display the launcher version",
        ),
        OptionSpec(
            "winver", None, True, True, forward_to(h.winver, _set_win_version),
            "--winver         Version to imitate (win95,nt40,win31,nt2k,win98,nt351,win30,win20)",
        ),
    ))
