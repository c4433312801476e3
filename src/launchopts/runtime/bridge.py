from __future__ import annotations

"""
bridge – Carry inheritable options across process launches.

Before the live argv is parsed, the options recorded by the parent process
are read back from an environment variable and parsed as a synthetic argv.
Once parsing is complete, the accumulated inheritable options are written to
the same variable so that child processes see them.
"""

import logging
import os
from typing import MutableMapping, Optional

from launchopts.constants import ENV_BUFFER_SIZE, INHERIT_ENV_VAR, MAX_INHERITED_ARGS
from launchopts.core.errors import InheritedOptionError
from launchopts.core.interfaces.environment import EnvironmentProtocol
from launchopts.parsing.driver import ParseDriver, PassResult
from launchopts.parsing.effects import EffectContext
from launchopts.parsing.rewriter import InheritanceAccumulator
from launchopts.parsing.tokenize import split_inherited


class OsEnvironment:
    """`EnvironmentProtocol` over `os.environ`."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value

    def unset(self, name: str) -> None:
        os.environ.pop(name, None)


class MappingEnvironment:
    """`EnvironmentProtocol` over a plain mapping (tests, embedding)."""

    def __init__(self, data: Optional[MutableMapping[str, str]] = None) -> None:
        self.data: MutableMapping[str, str] = data if data is not None else {}

    def get(self, name: str) -> Optional[str]:
        return self.data.get(name)

    def set(self, name: str, value: str) -> None:
        self.data[name] = value

    def unset(self, name: str) -> None:
        self.data.pop(name, None)


class InheritanceBridge:
    def __init__(
        self,
        env: Optional[EnvironmentProtocol] = None,
        *,
        variable: str = INHERIT_ENV_VAR,
        buffer_size: int = ENV_BUFFER_SIZE,
        max_args: int = MAX_INHERITED_ARGS,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._env = env if env is not None else OsEnvironment()
        self.variable = variable
        self._buffer_size = buffer_size
        self._max_args = max_args
        self._log = logger or logging.getLogger("launchopts.bridge")

    def read(self) -> str:
        """Return the inherited string, or '' when unset or oversized."""
        raw = self._env.get(self.variable) or ""
        if len(raw.encode("utf-8", "surrogateescape")) + 1 > self._buffer_size:
            self._log.warning(
                "%s is longer than %d bytes; inherited options ignored", self.variable, self._buffer_size - 1
            )
            return ""
        return raw

    def inherit(
        self, driver: ParseDriver, ctx: EffectContext, accumulator: InheritanceAccumulator
    ) -> Optional[PassResult]:
        """Parse the inherited options into *ctx* and *accumulator*.

        Returns None when nothing was inherited.

        Raises:
            InheritedOptionError: when a token is left over after the pass.
        """
        raw = self.read()
        if not raw:
            return None
        split = split_inherited(raw, limit=self._max_args)
        if split.truncated:
            self._log.warning(
                "%s holds more than %d arguments; extra arguments ignored", self.variable, self._max_args
            )
        if not split.tokens:
            return None
        result = driver.run(split.tokens, ctx, accumulator=accumulator)
        if result.remaining:
            raise InheritedOptionError(result.remaining[0], self.variable)
        return result

    def persist(self, accumulator: InheritanceAccumulator) -> None:
        if accumulator:
            self._env.set(self.variable, str(accumulator))
        else:
            self._env.unset(self.variable)
