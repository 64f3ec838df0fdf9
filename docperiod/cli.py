import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Iterator, Optional

import click
from dotenv import load_dotenv

from docperiod.config import Settings, load_settings
from docperiod.engine import apply_edits, synthesize_fixes
from docperiod.errors import ConfigError
from docperiod.report import FileReport, render
from docperiod.resolver import FileReferenceResolver
from docperiod.source import LineIndex, check_source

try:
    __version__ = version("docperiod")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

logger = logging.getLogger(__name__)


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="DOCPERIOD_LOG_FILE",
)
@click.version_option(__version__, prog_name="docperiod")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _iter_files(
    paths: tuple[Path, ...], settings: Settings
) -> Iterator[Path]:
    """Yield the files to check, expanding directories.

    Args:
        paths: Files and directories given on the command line.
        settings: Settings providing the suffixes of files to scan.

    Yields:
        Files in a stable order.
    """

    for path in paths:
        if path.is_dir():
            # Walk the directory for files with a configured suffix.
            for candidate in sorted(path.rglob("*")):
                if not candidate.is_file():
                    continue
                if candidate.suffix in settings.extensions:
                    yield candidate
        else:
            yield path


def _check_file(path: Path, settings: Settings, fix: bool) -> FileReport:
    """Check one file, fixing it in place when requested.

    Args:
        path: File to check.
        settings: Settings of the run.
        fix: Whether to insert the missing periods.

    Returns:
        The remaining violations of the file. A file that cannot be read
        is skipped and reported through ``errors``.
    """

    # Line endings are kept as written so a fix only inserts periods.
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Skipping unreadable file {path}: {exc}")
        return FileReport(path, [], LineIndex(), errors=[str(exc)])

    # Includes are resolved relative to the file's directory.
    resolver = FileReferenceResolver(path.parent)
    result = check_source(text, resolver, settings.tag_table())
    logger.debug(
        f"{path}: {result.comment_count} comments, "
        f"{len(result.violations)} violations"
    )

    if not fix:
        return FileReport(
            path,
            result.violations,
            LineIndex.from_text(text),
            errors=result.errors,
        )

    edits = synthesize_fixes(result.violations)
    if edits:
        text = apply_edits(text, edits)
        path.write_text(text, encoding="utf-8", newline="")
        logger.info(f"{path}: inserted {len(edits)} periods")

        # Offsets of the remaining violations moved with the edits, so check
        # the patched text again.
        result = check_source(text, resolver, settings.tag_table())

    return FileReport(
        path,
        result.violations,
        LineIndex.from_text(text),
        fixed=len(edits),
        errors=result.errors,
    )


@cli.command()
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option("--fix", is_flag=True, help="Insert missing periods in place.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="DOCPERIOD_CONFIG",
    default=None,
    help="Settings file (YAML or JSON).",
)
@click.pass_context
def check(
    ctx: click.Context,
    paths: tuple[Path, ...],
    fix: bool = False,
    output_format: str = "text",
    config_path: Optional[Path] = None,
) -> None:
    """Report documentation text that does not end with a period.

    Args:
        ctx: Click context object.
        paths: Files or directories to check.
        fix: Insert the missing periods in place.
        output_format: Format of the report.
        config_path: Optional settings file.
    """

    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    reports = [
        _check_file(p, settings, fix) for p in _iter_files(paths, settings)
    ]

    output = render(reports, output_format)
    if output:
        click.echo(output)

    fixed = sum(r.fixed for r in reports)
    if fix and fixed:
        click.echo(f"Fixed {fixed} violations", err=True)

    # Non-zero exit when anything is left to report.
    if any(r.violations for r in reports):
        ctx.exit(1)
