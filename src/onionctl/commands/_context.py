"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns configuration-file loading and saving around
the :class:`ConfigFacade`, and centralizes result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn

import click

from onionctl.output.formatters import OutputSettings, format_result
from onionctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from onionctl.config.settings import OnionSettings
    from onionctl.domain.onion_config import OnionConfig
    from onionctl.services.facade import ConfigFacade


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: OnionSettings) -> None:
        self.settings = settings

        from onionctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def new_facade(self) -> ConfigFacade:
        """A facade over an empty configuration with the configured defaults."""
        from onionctl.services.facade import ConfigFacade

        return ConfigFacade(defaults=self.settings.defaults)

    def open(self, path: Path, *, op: str) -> ConfigFacade:
        """Load the configuration at *path* into a fresh facade.

        Emits a failed *op* result and exits 1 if the file is missing or
        cannot be decoded.
        """
        from onionctl.infrastructure.config_file import read_config_file

        facade = self.new_facade()
        try:
            facade.load_file(read_config_file(path))
        except ValueError as exc:
            self.fail(op, "LOAD_FAILED", str(exc), path=str(path))
        return facade

    def save(self, path: Path, config: OnionConfig) -> None:
        """Persist *config* to *path*."""
        from onionctl.infrastructure.config_file import write_config_file

        write_config_file(path, config, indent=self.settings.output.indent)

    def fail(self, op: str, code: str, message: str, **detail: Any) -> NoReturn:
        """Emit a failed result and exit with code 1."""
        self.emit(
            ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=code, message=message, detail=detail),
            )
        )
        raise SystemExit(1)  # emit() already exits; keeps the NoReturn contract

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            no_color=self.settings.no_color,
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
