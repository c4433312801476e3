"""Public API surface for launchopts.rendering."""
from .usage import UsageReporter, release_info

__all__ = ["UsageReporter", "release_info"]
