"""Create the linky Typer CLI app."""

import logging
from pathlib import Path

import typer

from linky.api.config.LinkyConfig import LinkyConfig
from linky.api.link import check_records, extract_records, format_line, read_records
from linky.cli.display import CLIDisplay
from linky.utils import configure_logging, get_package_version

logger = logging.getLogger("linky.cli")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"linky {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the linky Typer app."""
    app = typer.Typer(
        name="linky",
        help="Extract links from Markdown files and check links for brokenness.",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def linky(
        files: list[Path] = typer.Argument(
            None, help="Markdown files to parse; without files, 'path:line: target' lines are read from stdin"
        ),
        check: bool = typer.Option(False, "--check", "-c", help="Check links"),
        follow: bool = typer.Option(False, "--follow", "-f", help="Follow HTTP redirects"),
        mute: list[str] = typer.Option(None, "--mute", "-m", help="Status to leave out of check output"),
        prefix: list[str] = typer.Option(None, "--prefix", "-p", help="Fragment prefix, tried in order"),
        root: Path = typer.Option(None, "--root", "-r", help="Join absolute local links to a document root"),
        urldecode: bool = typer.Option(False, "--urldecode", "-d", help="Percent-decode fragments and paths"),
        jobs: int = typer.Option(None, "--jobs", "-j", help="Worker threads (default: logical cores)"),
        timeout: float = typer.Option(None, "--timeout", "-t", help="HTTP timeout in seconds"),
        failures: bool = typer.Option(False, "--failures", "-F", help="Only print links that are not OK"),
        config_path: Path = typer.Option(None, "--config", help="Config file (default: ~/.linky/config.json)"),
        progress: bool = typer.Option(False, "--progress", help="Show a progress bar on stderr"),
        verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="More logging; repeat for debug"),
        version: bool = typer.Option(
            False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ) -> None:
        """Extract links from Markdown files and check links for brokenness."""
        display = CLIDisplay()
        try:
            config = LinkyConfig.load(config_path).merge(
                root=root,
                follow=follow or None,
                prefixes=prefix or None,
                urldecode=urldecode or None,
                jobs=jobs,
                timeout=timeout,
                mute=mute or None,
                failures_only=failures or None,
            )
        except ValueError as e:
            display.error("Invalid configuration", details=str(e))
            raise typer.Exit(2) from e

        configure_logging(verbose, config.log_file)

        if files:
            records = extract_records(str(path) for path in files)
        else:
            records = read_records(typer.get_text_stream("stdin"))

        if not check:
            for record in records:
                typer.echo(format_line(record))
            return

        records = list(records)
        muted = config.muted
        results = check_records(records, config)
        with display.progress(len(records), "Checking links") if progress else _NoProgress() as bar:
            for record, resolution in results:
                bar.update()
                if resolution.status in muted:
                    continue
                if resolution.error is not None:
                    for line in resolution.lines():
                        logger.info("%s:%d: %s", record.source_path, record.line_number, line)
                typer.echo(format_line(record, resolution.status))

    return app


class _NoProgress:
    def __enter__(self) -> "_NoProgress":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def update(self, advance: int = 1) -> None:
        pass
