from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public defaults to reduce cross-module coupling.
"""

# Environment variable carrying options inherited from the parent process.
INHERIT_ENV_VAR: str = 'LAUNCHOPTS_OPTIONS'

# Values of this size (encoded, terminator included) or larger are ignored.
ENV_BUFFER_SIZE: int = 1024

# Capacity of the synthetic argv built from the inherited variable.
MAX_INHERITED_ARGS: int = 255

SENTINEL: str = '--'

RELEASE_NAME: str = 'launchopts'
