"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the repository and service lazily and owns
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import click

from usecasectl.errors import UseCaseError
from usecasectl.output.formatters import OutputSettings, format_result
from usecasectl.services.result import ServiceResult

if TYPE_CHECKING:
    from usecasectl.config.settings import UcSettings
    from usecasectl.domain.models import UseCase
    from usecasectl.infrastructure.serializer import Serializer
    from usecasectl.services.usecase import UseCaseService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The storage directory is only created when a command first touches
    the service, so ``--help`` and ``lint`` never write to disk.
    """

    def __init__(self, settings: UcSettings) -> None:
        self.settings = settings
        self._serializer: Serializer | None = None
        self._service: UseCaseService | None = None

        from usecasectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def serializer(self) -> Serializer:
        if self._serializer is None:
            from usecasectl.infrastructure.serializer import Serializer

            self._serializer = Serializer()
        return self._serializer

    @property
    def service(self) -> UseCaseService:
        """The use-case service (created lazily on first access)."""
        if self._service is None:
            from usecasectl.infrastructure.repository import UseCaseRepository
            from usecasectl.services.usecase import UseCaseService

            repository = UseCaseRepository(self.settings.storage_directory, self.serializer)
            self._service = UseCaseService(repository)
        return self._service

    def read_document(self, path: Path) -> UseCase:
        """Decode a use-case JSON document from *path*."""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read {path}: {exc.strerror or exc}"
            raise click.ClickException(msg) from exc
        return self.serializer.deserialize(text)

    @contextmanager
    def reporting(self, op: str) -> Iterator[None]:
        """Emit typed failures and argument errors raised in the block as *op* results."""
        try:
            yield
        except (UseCaseError, ValueError) as exc:
            self.emit(ServiceResult.failure(op, exc))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
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
