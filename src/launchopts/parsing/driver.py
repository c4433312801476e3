from __future__ import annotations

"""
driver – Left-to-right option pass over an argument list.

One pass:
    * leaves non-option and unrecognized tokens in place, in order;
    * stops at the '--' sentinel, keeping it and everything after it;
    * runs each matched option's effect immediately, in argv order;
    * drops the consumed token(s) and records them for inheritable options.

The caller's list is never mutated; the result carries the new argv.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from launchopts.core.errors import UnknownOptionError
from launchopts.logging.helpers import trace_option
from launchopts.parsing.effects import EffectContext
from launchopts.parsing.matcher import OptionMatcher
from launchopts.parsing.rewriter import ArgvRewriter, InheritanceAccumulator
from launchopts.parsing.table import OptionSpec, OptionTable


@dataclass(frozen=True)
class AppliedOption:
    spec: OptionSpec
    argument: str
    consumed: Tuple[str, ...]


@dataclass(frozen=True)
class PassResult:
    remaining: List[str]
    applied: Tuple[AppliedOption, ...]
    inherited: Tuple[str, ...]
    stopped_at_sentinel: bool = False


class ParseDriver:
    def __init__(self, table: OptionTable, *, logger: Optional[logging.Logger] = None) -> None:
        self._table = table
        self._matcher = OptionMatcher(table)
        self._log = logger or logging.getLogger("launchopts.driver")

    def run(
        self,
        argv: Sequence[str],
        ctx: EffectContext,
        *,
        accumulator: Optional[InheritanceAccumulator] = None,
        skip_first: bool = False,
    ) -> PassResult:
        """Apply every recognized option in *argv* and return what is left.

        Args:
            argv: Tokens to scan.
            ctx: Per-parse state handed to option effects.
            accumulator: Shared inheritance accumulator; a fresh one is
                used when omitted.
            skip_first: Keep argv[0] (the program name) without matching it.
        """
        tokens = list(argv)
        rw = ArgvRewriter(accumulator)
        applied: List[AppliedOption] = []
        stopped = False

        i = 0
        if skip_first and tokens:
            rw.keep(tokens[0])
            i = 1

        while i < len(tokens):
            tok = tokens[i]
            if self._matcher.is_sentinel(tok):
                rw.keep(*tokens[i:])
                stopped = True
                break
            m = self._matcher.match(tok)
            if m is None:
                rw.keep(tok)
                i += 1
                continue

            spec = m.spec
            if m.inline_value is not None:
                arg, consumed = m.inline_value, (tok,)
            elif spec.takes_argument and i + 1 < len(tokens):
                arg, consumed = tokens[i + 1], (tok, tokens[i + 1])
            else:
                arg, consumed = "", (tok,)

            trace_option(self._log, spec.long_name, arg)
            spec.effect(ctx, arg)
            rw.consume(consumed, inherit=spec.inheritable)
            applied.append(AppliedOption(spec, arg, consumed))
            i += len(consumed)

        return PassResult(
            remaining=rw.kept,
            applied=tuple(applied),
            inherited=tuple(rw.inherited),
            stopped_at_sentinel=stopped,
        )

    @staticmethod
    def validate_remaining(argv: Sequence[str], *, skip_first: bool = True) -> List[str]:
        """Reject leftover option-like tokens and drop the first '--'.

        Scanning ends at the first '--'; anything after it belongs to the
        application.

        Raises:
            UnknownOptionError: for the first '-'-prefixed token before '--'.
        """
        out = list(argv)
        for i in range(1 if skip_first else 0, len(out)):
            tok = out[i]
            if OptionMatcher.is_sentinel(tok):
                del out[i]
                break
            if tok.startswith("-"):
                raise UnknownOptionError(tok)
        return out
