"""launchopts.logging – logger naming, handler setup and option tracing."""
from .helpers import JsonLogFormatter, configure_logging, get_logger, is_trace_enabled, trace_option

__all__ = ["JsonLogFormatter", "configure_logging", "get_logger", "is_trace_enabled", "trace_option"]
