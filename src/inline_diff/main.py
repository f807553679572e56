"""inline-diff CLI entrypoint."""

from __future__ import annotations

import logging

import typer

from inline_diff import __version__
from inline_diff.output import OutputContext

app = typer.Typer(
    name="idiff",
    help="Show the changes between two files as an inline diff.",
    no_args_is_help=True,
)


class State:
    """Global state shared across commands."""

    output: OutputContext


state = State()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"idiff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    output_json: bool = typer.Option(False, "--json", help="Output hunks as JSON."),
    json_fields: str | None = typer.Option(
        None, "--fields", help="Filter JSON to FIELDS (comma-separated). Implies --json."
    ),
    jq_expr: str | None = typer.Option(None, "--jq", help="Filter JSON with jq expression. Implies --json."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress status messages."),
    debug: bool = typer.Option(False, "--debug", help="Log debug messages to stderr."),
) -> None:
    """inline-diff - unified view of the changes between two files."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # --fields and --jq imply --json
    is_json = output_json or json_fields is not None or jq_expr is not None
    parsed_fields = json_fields.split(",") if json_fields else None

    state.output = OutputContext(
        json_fields=parsed_fields if is_json else None,
        jq_expr=jq_expr,
        quiet=quiet,
        force_json=is_json,
    )


from inline_diff.commands import diff  # noqa: E402

app.command("show")(diff.show)
app.command("hunks")(diff.hunks)

if __name__ == "__main__":
    app()
