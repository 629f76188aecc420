"""CLI interface using typer."""

import asyncio
import logging
import sys

import typer
from pydantic import BaseModel

from .config import settings
from .core import Failure, Fetcher, FetchOutcome
from .models import PresentationDefinition, UnvalidatedRequestObject
from .observability import configure_logging
from .response_type import ResponseType, UnsupportedResponseType

app = typer.Typer(
    name="vpfetch",
    help="Fetch and decode OpenID4VP resources",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show debug diagnostics"),
):
    """Configure logging before any command runs."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    configure_logging(level=level, output=sys.stderr, json_format=settings.log_json)


async def _fetch(payload_type: type, url: str, insecure: bool, text: bool = False) -> FetchOutcome:
    async with Fetcher(payload_type, trust_any_certificate=insecure or None) as fetcher:
        if text:
            return await fetcher.fetch_text(url)
        return await fetcher.fetch(url)


def _unwrap(outcome: FetchOutcome):
    if isinstance(outcome, Failure):
        typer.echo(f"Error: {outcome.error}", err=True)
        raise typer.Exit(code=1)
    return outcome.value


def _dump(model: BaseModel) -> str:
    return model.model_dump_json(indent=2, exclude_none=True)


@app.command("request-object")
def request_object(
    url: str = typer.Argument(..., help="URL of the authorization request object"),
    insecure: bool = typer.Option(False, "--insecure", "-k", help="Accept self-signed certificates"),
):
    """Fetch an authorization request object and validate its response type."""
    request = _unwrap(asyncio.run(_fetch(UnvalidatedRequestObject, url, insecure)))
    typer.echo(_dump(request))
    try:
        response_type = ResponseType.from_unvalidated(request)
    except UnsupportedResponseType as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Response type: {response_type.value}")


@app.command("presentation-definition")
def presentation_definition(
    url: str = typer.Argument(..., help="URL of the presentation definition"),
    insecure: bool = typer.Option(False, "--insecure", "-k", help="Accept self-signed certificates"),
):
    """Fetch a presentation definition."""
    definition = _unwrap(asyncio.run(_fetch(PresentationDefinition, url, insecure)))
    typer.echo(_dump(definition))


@app.command()
def text(
    url: str = typer.Argument(..., help="URL to fetch"),
    insecure: bool = typer.Option(False, "--insecure", "-k", help="Accept self-signed certificates"),
):
    """Fetch a URL and print the body as text."""
    body = _unwrap(asyncio.run(_fetch(str, url, insecure, text=True)))
    sys.stdout.write(body)


@app.command("response-type")
def response_type(
    value: str = typer.Argument(..., help="Declared response_type value"),
):
    """Validate a response_type value."""
    try:
        parsed = ResponseType.parse(value)
    except UnsupportedResponseType as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(parsed.name)


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"vpfetch {__version__}")


if __name__ == "__main__":
    app()
