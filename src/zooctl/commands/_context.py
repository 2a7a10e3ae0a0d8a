"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Zoo initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from zooctl.domain.errors import ZooError
from zooctl.output.formatters import OutputSettings, format_result
from zooctl.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from zooctl.config.settings import ZooSettings
    from zooctl.infrastructure.zoo import Zoo


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The zoo is lazily initialized on first use so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: ZooSettings) -> None:
        self.settings = settings
        self._zoo: Zoo | None = None

        from zooctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def zoo(self) -> Zoo:
        """The zoo store (created lazily on first access)."""
        if self._zoo is None:
            from zooctl.infrastructure.zoo import Zoo

            self._zoo = Zoo(self.settings)
            click.get_current_context().call_on_close(self._zoo.close)
        return self._zoo

    def run(
        self,
        op: str,
        action: Callable[[], dict[str, Any] | None],
        *,
        warnings: list[str] | None = None,
    ) -> None:
        """Invoke a service call and emit its outcome.

        *action* returns the success payload and may append to *warnings*;
        a :class:`ZooError` raised by the service becomes an error envelope.
        """
        try:
            data = action()
        except ZooError as exc:
            self.emit(ServiceResult.failure(op, exc))
            return
        self.emit(ServiceResult(ok=True, op=op, data=data or {}, warnings=warnings or []))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
