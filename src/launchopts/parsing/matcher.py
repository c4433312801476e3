from __future__ import annotations

"""
matcher – Decide whether one argv token names a registered option.

Accepted spellings:
    -x              short name (single character body)
    -name, --name   long name
    --name=value    long name with inline value (argument-taking options only)

The literal '--' is reported as the stop-parsing sentinel.
"""

from dataclasses import dataclass
from typing import Optional

from launchopts.constants import SENTINEL
from launchopts.parsing.table import OptionSpec, OptionTable


@dataclass(frozen=True)
class OptionMatch:
    spec: OptionSpec
    inline_value: Optional[str] = None


class OptionMatcher:
    def __init__(self, table: OptionTable) -> None:
        self._table = table

    @staticmethod
    def is_sentinel(token: str) -> bool:
        return token == SENTINEL

    def match(self, token: str) -> Optional[OptionMatch]:
        """Return the first table entry matching *token*, or None."""
        if not token.startswith("-"):
            return None
        body = token[1:]
        if len(body) == 1:
            if body == "-":
                return None
            for spec in self._table:
                if spec.short_name == body:
                    return OptionMatch(spec)
            return None

        if body.startswith("-"):
            body = body[1:]
        name, eq, value = body.partition("=")
        for spec in self._table:
            if body == spec.long_name:
                return OptionMatch(spec)
            if eq and spec.takes_argument and name == spec.long_name:
                return OptionMatch(spec, value)
        return None
