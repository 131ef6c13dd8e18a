"""Command-line interface for decimalfmt."""

import typer

from decimalfmt.cli_modules import column_cmd, format_cmd, inspect_cmd

app = typer.Typer(
    name="decimalfmt",
    help="Format numbers with decimal format patterns",
    add_completion=False,
)

app.command(name="format")(format_cmd)
app.command(name="inspect")(inspect_cmd)
app.command(name="column")(column_cmd)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
