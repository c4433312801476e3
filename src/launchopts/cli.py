from __future__ import annotations

import os
import shlex
import sys
from dataclasses import dataclass
from typing import NoReturn, Optional, Sequence, Tuple

from launchopts.constants import RELEASE_NAME
from launchopts.core.errors import DebugFilterSyntaxError, InheritedOptionError, UnknownOptionError
from launchopts.core.interfaces.environment import EnvironmentProtocol
from launchopts.core.interfaces.trace import TraceRegistryProtocol
from launchopts.core.models import LauncherOptions
from launchopts.logging.helpers import configure_logging, get_logger
from launchopts.parsing.driver import AppliedOption, ParseDriver
from launchopts.parsing.effects import EffectContext
from launchopts.parsing.rewriter import InheritanceAccumulator
from launchopts.parsing.table import LauncherHooks, OptionTable, build_default_table
from launchopts.rendering.usage import UsageReporter
from launchopts.runtime.appargs import ApplicationArgs
from launchopts.runtime.bridge import InheritanceBridge
from launchopts.runtime.config import ParserConfig
from launchopts.runtime.trace import DebugChannelRegistry


logger = get_logger('launchopts')


@dataclass(frozen=True)
class ParseOutcome:
    """Everything a top-level parse produced."""
    app_args: ApplicationArgs
    options: LauncherOptions
    trace: TraceRegistryProtocol
    inherited: str
    applied: Tuple[AppliedOption, ...]


class OptionsParser:
    """Top-level façade: inherited options, live argv, validation, persistence."""

    def __init__(
        self,
        *,
        table: Optional[OptionTable] = None,
        hooks: Optional[LauncherHooks] = None,
        env: Optional[EnvironmentProtocol] = None,
        trace: Optional[TraceRegistryProtocol] = None,
        config: Optional[ParserConfig] = None,
    ) -> None:
        self._cfg = config or ParserConfig()
        self._table = table if table is not None else build_default_table(hooks)
        self._trace = trace
        self._log = self._cfg.logger
        self._driver = ParseDriver(self._table, logger=get_logger('driver'))
        self._bridge = InheritanceBridge(
            env,
            variable=self._cfg.env_var,
            buffer_size=self._cfg.buffer_size,
            max_args=self._cfg.max_inherited_args,
            logger=get_logger('bridge'),
        )

    @property
    def table(self) -> OptionTable:
        return self._table

    def parse(self, argv: Sequence[str]) -> ParseOutcome:
        """Parse *argv* (argv[0] is the program name) and return the outcome.

        Help, version and every fatal error terminate through `SystemExit`.
        """
        argv0 = argv[0] if argv else RELEASE_NAME
        reporter = UsageReporter(self._table, argv0=argv0, stream=self._cfg.stream)
        trace = self._trace if self._trace is not None else DebugChannelRegistry(logger=get_logger('trace'))
        ctx = EffectContext(
            options=LauncherOptions(),
            trace=trace,
            reporter=reporter,
            logger=get_logger('effects'),
        )
        accumulator = InheritanceAccumulator()

        try:
            inherited = self._bridge.inherit(self._driver, ctx, accumulator)
            live = self._driver.run(argv, ctx, accumulator=accumulator, skip_first=True)
            self._bridge.persist(accumulator)
            final = self._driver.validate_remaining(live.remaining)
        except DebugFilterSyntaxError as exc:
            self._log.error('%s', exc)
            reporter.show_debugmsg_syntax()
        except (UnknownOptionError, InheritedOptionError) as exc:
            self._log.error('%s', exc)
            reporter.show_usage(1)
        except MemoryError:
            self._log.error('Virtual memory exhausted')
            raise SystemExit(1) from None

        applied = (inherited.applied if inherited else ()) + live.applied
        return ParseOutcome(
            app_args=ApplicationArgs(final),
            options=ctx.options,
            trace=trace,
            inherited=str(accumulator),
            applied=applied,
        )


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `python -m launchopts`.

    Prints the application command line left after option parsing.
    """
    configure_logging()
    try:
        outcome = OptionsParser().parse(list(sys.argv if argv is None else argv))
        _, app_argv = outcome.app_args.wmain_args()
        sys.stdout.write(shlex.join(app_argv[1:]) + '\n')
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except MemoryError:
        logger.error('Virtual memory exhausted')
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
