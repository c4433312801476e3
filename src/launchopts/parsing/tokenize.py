"""
tokenize – Split the inherited-options string into argv-style tokens.

Rules
-----
• Tokens are separated by runs of spaces and tabs; no quoting is honored,
  matching the way the string was produced (space-joined raw tokens).
• At most `limit` tokens are returned. Extra tokens are dropped and the
  caller is told through the `truncated` flag.
"""
import re
from typing import List, NamedTuple

from launchopts.constants import MAX_INHERITED_ARGS

_SEPARATORS = re.compile(r"[ \t]+")


class InheritedTokens(NamedTuple):
    tokens: List[str]
    truncated: bool


def split_inherited(raw: str, *, limit: int = MAX_INHERITED_ARGS) -> InheritedTokens:
    """Return the tokens of *raw*, capped at *limit*.

    Examples
    --------
    >>> split_inherited("--dll  comctl32=n\\t--managed").tokens
    ['--dll', 'comctl32=n', '--managed']
    """
    tokens = [t for t in _SEPARATORS.split(raw) if t]
    if len(tokens) > limit:
        return InheritedTokens(tokens[:limit], True)
    return InheritedTokens(tokens, False)
