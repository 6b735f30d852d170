"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click

    from linky.cli._create_app import _create_app
    from linky.cli.display import CLIDisplay

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        result = app(args=argv, prog_name="linky", standalone_mode=False)
        return result if isinstance(result, int) else 0
    except click.exceptions.Exit as e:
        return e.exit_code
    except click.exceptions.Abort:
        return 130
    except KeyboardInterrupt:
        return 130
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except Exception as e:
        CLIDisplay().error("Unhandled error", details=f"{type(e).__name__}: {e}")
        return 1
