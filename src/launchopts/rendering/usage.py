from __future__ import annotations

"""
usage – Banner, usage and diagnostic text for the launcher.

Every public method prints and then terminates by raising `SystemExit`.
"""

import sys
from typing import NoReturn, Optional, TextIO

from launchopts.constants import RELEASE_NAME
from launchopts.core.models import DEBUG_CLASSES
from launchopts.parsing.table import OptionTable


def release_info() -> str:
    from launchopts import __version__
    return f"{RELEASE_NAME} {__version__}"


class UsageReporter:
    """Default `ReporterProtocol` implementation writing to a text stream."""

    def __init__(self, table: OptionTable, *, argv0: str = RELEASE_NAME, stream: Optional[TextIO] = None) -> None:
        self._table = table
        self._argv0 = argv0
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stderr

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def usage_text(self) -> str:
        lines = [
            f"{release_info()}\n",
            f"Usage: {self._argv0} [options] [--] program_name [arguments]",
            "The -- has to be used if you specify arguments (of the program)\n",
            "Options:",
        ]
        lines.extend(f"   {usage}" for usage in self._table.usage_lines())
        return "\n".join(lines) + "\n"

    def show_usage(self, code: int = 0) -> NoReturn:
        self._write(self.usage_text())
        raise SystemExit(code)

    def show_version(self) -> NoReturn:
        self._write(f"{release_info()}\n")
        raise SystemExit(0)

    def show_debugmsg_syntax(self) -> NoReturn:
        names = "".join(f"{cls.label:<9}" for cls in DEBUG_CLASSES)
        self._write(
            f"{self._argv0}: Syntax: --debugmsg [class]+xxx,...  or -debugmsg [class]-xxx,...\n"
            "Example: --debugmsg +all,warn-heap\n"
            "  turn on all messages except warning heap messages\n"
            "Available message classes:\n"
            f"{names}\n\n"
        )
        raise SystemExit(1)
