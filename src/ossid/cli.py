"""Command-line interface for ossid.

Example:
    >>> # From terminal:
    >>> # ossid --version
    >>> # ossid generate --count 5
    >>> # ossid validate 01ARZ3NDEKTSV4RRFFQ69G5FAV
    >>> # ossid inspect 01ARZ3NDEKTSV4RRFFQ69G5FAV [--json]
    >>> # ossid compare <id-a> <id-b>
    >>> # ossid demo
"""

import json
from typing import Annotated

import typer

from ossid import __version__
from ossid.errors import InvalidFormatError
from ossid.examples.basic_usage import main as run_demo
from ossid.ids import get_identifier_service
from ossid.observability.logging import configure_logging, get_logger

app = typer.Typer(help="ossid: time-sortable unique identifiers.")

logger = get_logger(__name__)

_ORDER_WORDS = {-1: "older than", 0: "the same as", 1: "newer than"}


def _version_callback(value: bool) -> None:
    """Print the version and exit when requested."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


VERSION_OPTION = typer.Option(
    False,
    "--version",
    help="Show ossid version and exit.",
    callback=_version_callback,
    is_eager=True,
)


@app.callback()
def cli(
    version: bool = VERSION_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """ossid CLI entrypoint."""
    if verbose:
        configure_logging(log_level="DEBUG", force=True)


@app.command("generate")
def generate(
    count: Annotated[
        int,
        typer.Option("--count", "-n", min=1, help="Number of identifiers to generate."),
    ] = 1,
) -> None:
    """Print new identifiers, one per line, in increasing order."""
    service = get_identifier_service()
    for _ in range(count):
        typer.echo(service.generate())
    logger.debug("ossid.cli.generated", count=count)


@app.command("validate")
def validate(
    token: Annotated[str, typer.Argument(help="Identifier to check.")],
) -> None:
    """Check whether TOKEN is a valid identifier (exit code 1 if not)."""
    if get_identifier_service().is_valid(token):
        typer.echo("valid")
        return
    typer.echo("invalid")
    raise typer.Exit(code=1)


@app.command("inspect")
def inspect_id(
    token: Annotated[str, typer.Argument(help="Identifier to inspect.")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Emit JSON instead of text."),
    ] = False,
) -> None:
    """Show the creation timestamp and age of TOKEN."""
    service = get_identifier_service()
    try:
        parsed = service.parse(token)
        age = service.age(token)
    except InvalidFormatError as exc:
        raise typer.BadParameter(exc.message, param_hint="TOKEN") from exc
    if as_json:
        typer.echo(
            json.dumps(
                {
                    "id": token,
                    "timestamp": parsed.datetime.isoformat(),
                    "timestamp_ms": parsed.milliseconds,
                    "age_seconds": age.total_seconds(),
                },
                indent=2,
            )
        )
        return
    typer.echo(f"ID:        {token}")
    typer.echo(f"Timestamp: {parsed.datetime.isoformat()}")
    typer.echo(f"Age:       {age}")


@app.command("compare")
def compare(
    first: Annotated[str, typer.Argument(help="First identifier.")],
    second: Annotated[str, typer.Argument(help="Second identifier.")],
) -> None:
    """Compare two identifiers chronologically (prints -1, 0 or 1)."""
    try:
        order = get_identifier_service().compare(first, second)
    except InvalidFormatError as exc:
        raise typer.BadParameter(exc.message) from exc
    typer.echo(str(order))
    typer.echo(f"{first} is {_ORDER_WORDS[order]} {second}")


@app.command("demo")
def demo() -> None:
    """Run the package tour."""
    run_demo()


def main() -> None:
    """Run the ossid CLI."""
    app()


if __name__ == "__main__":
    main()
