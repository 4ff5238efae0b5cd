from __future__ import annotations

"""crpt_api.cli
=================================
Command-line interface powered by Typer.

Usage examples
--------------
$ crpt-api create doc.json --signature "$(cat doc.sig)"
$ crpt-api --log-level DEBUG create doc.json -s SIG --type LP_INTRODUCE_GOODS_CSV --format CSV
"""

from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional
import logging

import httpx
import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from .app.container import Container
from .config.settings import AppConfig
from .core.domain.enums import DocumentFormat, DocumentType
from .infra.schemas import Document

app = typer.Typer(add_completion=False, help="Document registration API client")


class LogLevel(str, Enum):
    OFF = "OFF"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


@contextmanager
def provide_container() -> Iterator[Container]:
    container = Container()
    container.config.from_pydantic(AppConfig())
    container.init_resources()
    try:
        yield container
    finally:
        container.shutdown_resources()


@app.callback()
def main(
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option(
            "--log-level",
            help="Set log level (OFF, CRITICAL, ERROR, WARNING, INFO, DEBUG). Default: OFF",
        ),
    ] = None,
) -> None:
    """Root command callback to configure logging if requested."""
    if log_level in (None, LogLevel.OFF):
        return

    package_name = __package__.split(".", 1)[0] if __package__ else "crpt_api"
    logger = logging.getLogger(package_name)

    # Avoid stacking console handlers on repeated invocations
    has_stream = any(type(h) is logging.StreamHandler for h in logger.handlers)
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
        logger.addHandler(handler)

    logger.propagate = False
    logger.setLevel(getattr(logging, log_level.value))


@app.command(help="Register a goods introduction document read from a JSON file and print the response body.")
def create(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Document JSON file"),
    signature: str = typer.Option(..., "--signature", "-s", help="Detached signature of the document"),
    document_type: DocumentType = typer.Option(DocumentType.LP_INTRODUCE_GOODS, "--type", help="Document type"),
    document_format: DocumentFormat = typer.Option(DocumentFormat.MANUAL, "--format", help="Document format"),
) -> None:
    try:
        document = Document.model_validate_json(path.read_text(encoding="utf-8"))
    except (ValidationError, UnicodeDecodeError) as e:
        typer.echo(f"Invalid document: {e}", err=True)
        raise typer.Exit(code=1)

    with provide_container() as container:
        uc = container.create_document_uc()
        try:
            body = uc.execute(document, signature, document_type=document_type, document_format=document_format)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        except httpx.HTTPError as e:
            typer.echo(f"Request failed: {e}", err=True)
            raise typer.Exit(code=1)
    typer.echo(body)


if __name__ == "__main__":
    app()
