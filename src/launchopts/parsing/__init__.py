"""Public API surface for launchopts.parsing."""
from .debugmsg import DebugFilterParser
from .driver import AppliedOption, ParseDriver, PassResult
from .matcher import OptionMatch, OptionMatcher
from .rewriter import ArgvRewriter, InheritanceAccumulator
from .table import LauncherHooks, OptionSpec, OptionTable, build_default_table

__all__ = [
    "AppliedOption",
    "ArgvRewriter",
    "DebugFilterParser",
    "InheritanceAccumulator",
    "LauncherHooks",
    "OptionMatch",
    "OptionMatcher",
    "OptionSpec",
    "OptionTable",
    "ParseDriver",
    "PassResult",
    "build_default_table",
]
