"""CLI entry point."""
import sys
from pathlib import Path
from typing import Optional

import typer

from mockhash.domain.entities.mock_request import MockRequest
from mockhash.infra.common import (
    MockHashError,
    compute_md5_string,
    compute_sha256,
    get_logger,
    load_app_config,
    setup_logging,
)
from mockhash.use_cases.fingerprint_request import fingerprint_request

logger = get_logger(__name__)

app = typer.Typer(help="Content-addressing helpers for HTTP mocks.", no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Content-addressing helpers for HTTP mocks."""
    ctx.obj = {"verbose": verbose}
    setup_logging("DEBUG" if verbose else "WARNING", stream=sys.stderr, force=True)


def _read_input(path: str) -> bytes:
    """Read bytes from a file, or stdin when path is "-"."""
    if path == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(path).read_bytes()
    except OSError as e:
        typer.echo(f"Cannot read {path}: {e}", err=True)
        raise typer.Exit(code=2)


@app.command()
def md5(path: str = typer.Argument(..., help="File to hash, or - for stdin")):
    """Print the MD5 hex digest of a file."""
    typer.echo(compute_md5_string(_read_input(path)))


@app.command()
def sha256(path: str = typer.Argument(..., help="File to hash, or - for stdin")):
    """Print the SHA-256 hex digest of a file."""
    digest = compute_sha256(_read_input(path))
    if digest is None:
        typer.echo("SHA-256 is not available in this environment", err=True)
        raise typer.Exit(code=1)
    typer.echo(digest.hex())


@app.command()
def fingerprint(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Request URL"),
    method: str = typer.Option("GET", "--method", "-X", help="HTTP method"),
    body_file: Optional[str] = typer.Option(None, "--body-file", help="File holding the request body"),
    content_type: Optional[str] = typer.Option(None, "--content-type", help="Request Content-Type"),
    normalizer: Optional[str] = typer.Option(None, "--normalizer", help="Normalizer plugin or rules profile"),
    prefix_length: Optional[int] = typer.Option(None, "--prefix-length", min=1, max=32, help="Hash length"),
    env: Optional[str] = typer.Option(None, "--env", help="Config environment (local, staging, production)"),
):
    """Print the request hash and mock file names for a request."""
    try:
        app_config = load_app_config(env)
        if not (ctx.obj or {}).get("verbose"):
            setup_logging(app_config.log_level, stream=sys.stderr, force=True)
        
        headers = {"Content-Type": content_type} if content_type else None
        body = _read_input(body_file) if body_file else None
        request = MockRequest(url=url, method=method.upper(), headers=headers, body=body)
        
        result = fingerprint_request(request, app_config, normalizer, prefix_length)
    except (MockHashError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    
    logger.info("Fingerprinted %s with %s", result.url, result.normalizer)
    typer.echo(f"hash: {result.request_hash}")
    typer.echo(f"request_file: {result.request_file}")
    if result.request_body_file:
        typer.echo(f"request_body_file: {result.request_body_file}")


if __name__ == "__main__":
    app()
