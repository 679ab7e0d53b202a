"""stylestats CLI entry point."""

from __future__ import annotations

import logging

import click

from stylestats import __version__
from stylestats.config import StatsConfig
from stylestats.errors import StyleStatsError
from stylestats.pipeline import run_report


class _EchoHandler(logging.Handler):
    """Logging handler writing through ``click.echo`` to stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(quiet: bool) -> None:
    handler = _EchoHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    log = logging.getLogger("stylestats")
    log.handlers[:] = [handler]
    log.setLevel(logging.WARNING if quiet else logging.INFO)


@click.command()
@click.argument("directory", required=False, type=click.Path(file_okay=False))
@click.option(
    "--workers",
    default=StatsConfig.max_workers,
    type=click.IntRange(min=1),
    show_default=True,
    help="Files processed concurrently",
)
@click.option(
    "--encoding",
    default=StatsConfig.encoding,
    show_default=True,
    help="Encoding used to read stylesheet files",
)
@click.option("--quiet", is_flag=True, help="Only report parse failures on stderr")
@click.version_option(version=__version__, prog_name="stylestats")
def cli(directory: str | None, workers: int, encoding: str, quiet: bool) -> None:
    """Print per-file stylesheet statistics for DIRECTORY as CSV.

    DIRECTORY defaults to ./css.  Every file name must start with a numeric
    event id.
    """
    _configure_logging(quiet)
    config = StatsConfig(max_workers=workers, encoding=encoding)

    try:
        report = run_report(directory, config)
    except (StyleStatsError, OSError, UnicodeDecodeError, LookupError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(report, nl=False)


if __name__ == "__main__":
    cli()
