from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional, TextIO

from launchopts.constants import ENV_BUFFER_SIZE, INHERIT_ENV_VAR, MAX_INHERITED_ARGS


@dataclass(frozen=True)
class ParserConfig:
    """Immutable settings for one `OptionsParser`."""
    env_var: str = INHERIT_ENV_VAR
    buffer_size: int = ENV_BUFFER_SIZE
    max_inherited_args: int = MAX_INHERITED_ARGS
    stream: Optional[TextIO] = None
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("launchopts"))
