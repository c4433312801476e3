from __future__ import annotations

"""Application-facing argc/argv accessors."""

import os
from typing import List, Sequence, Tuple


class ApplicationArgs:
    """Filtered argv handed to the embedded application.

    The byte form is fixed at construction; the text form is decoded from
    it on first request and reused afterwards.
    """

    def __init__(self, argv: Sequence[str]) -> None:
        self._argv: List[bytes] = [os.fsencode(a) for a in argv]
        self._wargv: List[str] | None = None

    def __len__(self) -> int:
        return len(self._argv)

    def main_args(self) -> Tuple[int, List[bytes]]:
        return len(self._argv), self._argv

    def wmain_args(self) -> Tuple[int, List[str]]:
        if self._wargv is None:
            self._wargv = [os.fsdecode(a) for a in self._argv]
        return len(self._argv), self._wargv

    def __repr__(self) -> str:
        return f"ApplicationArgs({self.wmain_args()[1]!r})"
