from .environment import EnvironmentProtocol
from .reporting import ReporterProtocol
from .trace import TraceRegistryProtocol

__all__ = [
    'EnvironmentProtocol',
    'ReporterProtocol',
    'TraceRegistryProtocol',
]
