from __future__ import annotations
from typing import NoReturn, Protocol, runtime_checkable


@runtime_checkable
class ReporterProtocol(Protocol):
    """Terminal output used by --help/--version and by fatal errors."""

    def show_usage(self, code: int = 0) -> NoReturn:
        """Print the banner, usage line and option table, then exit."""
        ...

    def show_version(self) -> NoReturn: ...
