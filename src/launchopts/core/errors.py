from __future__ import annotations

"""Exception hierarchy for option parsing.

Parsing layers raise these; `launchopts.cli.OptionsParser` reports them and
terminates the process.
"""

from typing import Optional


class OptionsError(ValueError):
    """Base class for every option-parsing failure."""


class OptionTableError(OptionsError):
    """Raised when an option table violates its naming invariants."""


class DebugFilterSyntaxError(OptionsError):
    """Raised when a --debugmsg argument contains a malformed clause."""

    def __init__(self, argument: str, clause: Optional[str] = None) -> None:
        self.argument = argument
        self.clause = clause
        if clause is None:
            super().__init__(f'empty debug filter {argument!r}')
        else:
            super().__init__(f'malformed debug filter clause {clause!r} in {argument!r}')


class UnknownOptionError(OptionsError):
    """Raised when a '-'-prefixed token survives the live parse."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown option '{token}'")


class InheritedOptionError(OptionsError):
    """Raised when a token from the inherited variable is not an option."""

    def __init__(self, token: str, variable: str) -> None:
        self.token = token
        self.variable = variable
        super().__init__(f"Unknown option '{token}' in {variable} variable")
