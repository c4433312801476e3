from __future__ import annotations

"""
effects – The closed set of option effect shapes.

Every option in a table carries exactly one of:

    FlagSetter       switch a boolean field of LauncherOptions on
    ValueForwarder   hand the option argument to a callable
    TerminalAction   print help or version text and terminate

Effects receive an `EffectContext` carrying the per-parse state, so option
tables stay immutable and can be shared between parses.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Literal, Optional, Union

from launchopts.core.interfaces.reporting import ReporterProtocol
from launchopts.core.interfaces.trace import TraceRegistryProtocol
from launchopts.core.models import LauncherOptions


@dataclass
class EffectContext:
    """Mutable state an effect may touch during one top-level parse."""
    options: LauncherOptions
    trace: TraceRegistryProtocol
    reporter: ReporterProtocol
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("launchopts.effects"))


@dataclass(frozen=True)
class FlagSetter:
    attr: str

    def __call__(self, ctx: EffectContext, arg: str) -> None:
        setattr(ctx.options, self.attr, True)


@dataclass(frozen=True)
class ValueForwarder:
    handler: Callable[[EffectContext, str], None]

    def __call__(self, ctx: EffectContext, arg: str) -> None:
        self.handler(ctx, arg)


@dataclass(frozen=True)
class TerminalAction:
    kind: Literal["help", "version"]

    def __call__(self, ctx: EffectContext, arg: str) -> None:
        if self.kind == "help":
            ctx.reporter.show_usage(0)
        ctx.reporter.show_version()


OptionEffect = Union[FlagSetter, ValueForwarder, TerminalAction]


def forward_to(callback: Optional[Callable[[str], None]], fallback: Callable[[EffectContext, str], None]) -> ValueForwarder:
    """Build a forwarder calling *callback* when given, *fallback* otherwise."""
    if callback is None:
        return ValueForwarder(fallback)
    return ValueForwarder(lambda ctx, arg: callback(arg))
