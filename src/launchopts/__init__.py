from __future__ import annotations

from typing import Optional, Sequence

from launchopts.cli import OptionsParser, ParseOutcome, main
from launchopts.constants import INHERIT_ENV_VAR
from launchopts.core.errors import (
    DebugFilterSyntaxError,
    InheritedOptionError,
    OptionsError,
    OptionTableError,
    UnknownOptionError,
)
from launchopts.core.models import DebugClass, DebugFilterEdit, LauncherOptions, ModuleListEdit
from launchopts.parsing.debugmsg import DebugFilterParser
from launchopts.parsing.table import LauncherHooks, OptionSpec, OptionTable, build_default_table
from launchopts.runtime.appargs import ApplicationArgs
from launchopts.runtime.bridge import MappingEnvironment, OsEnvironment
from launchopts.runtime.config import ParserConfig
from launchopts.runtime.trace import DebugChannelRegistry

__version__ = '0.3.1'


def parse_options(
    argv: Sequence[str],
    *,
    hooks: Optional[LauncherHooks] = None,
    env=None,
    config: Optional[ParserConfig] = None,
) -> ParseOutcome:
    """Convenience helper: parse *argv* with the default option table."""
    return OptionsParser(hooks=hooks, env=env, config=config).parse(argv)


__all__ = [
    'INHERIT_ENV_VAR',
    'ApplicationArgs',
    'DebugChannelRegistry',
    'DebugClass',
    'DebugFilterEdit',
    'DebugFilterParser',
    'DebugFilterSyntaxError',
    'InheritedOptionError',
    'LauncherHooks',
    'LauncherOptions',
    'MappingEnvironment',
    'ModuleListEdit',
    'OptionSpec',
    'OptionTable',
    'OptionTableError',
    'OptionsError',
    'OptionsParser',
    'OsEnvironment',
    'ParseOutcome',
    'ParserConfig',
    'UnknownOptionError',
    'build_default_table',
    'main',
    'parse_options',
]
