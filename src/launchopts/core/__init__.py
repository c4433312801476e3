from __future__ import annotations

"""Public surface for launchopts.core.

Protocols, data model and errors shared by the parsing and runtime layers:

    from launchopts.core import DebugFilterEdit, OptionsError, ...
"""

from launchopts.core.errors import (
    DebugFilterSyntaxError,
    InheritedOptionError,
    OptionsError,
    OptionTableError,
    UnknownOptionError,
)
from launchopts.core.interfaces import (
    EnvironmentProtocol,
    ReporterProtocol,
    TraceRegistryProtocol,
)
from launchopts.core.models import (
    DEBUG_CLASSES,
    DebugClass,
    DebugFilterEdit,
    LauncherOptions,
    ModuleListEdit,
)

__all__ = [
    # Protocols
    "EnvironmentProtocol",
    "ReporterProtocol",
    "TraceRegistryProtocol",
    # Models
    "DEBUG_CLASSES",
    "DebugClass",
    "DebugFilterEdit",
    "LauncherOptions",
    "ModuleListEdit",
    # Errors
    "DebugFilterSyntaxError",
    "InheritedOptionError",
    "OptionsError",
    "OptionTableError",
    "UnknownOptionError",
]
