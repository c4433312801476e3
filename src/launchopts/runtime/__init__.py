"""Public API surface for launchopts.runtime."""
from .appargs import ApplicationArgs
from .bridge import InheritanceBridge, MappingEnvironment, OsEnvironment
from .config import ParserConfig
from .trace import DebugChannelRegistry

__all__ = [
    "ApplicationArgs",
    "DebugChannelRegistry",
    "InheritanceBridge",
    "MappingEnvironment",
    "OsEnvironment",
    "ParserConfig",
]
