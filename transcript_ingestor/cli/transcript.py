# transcript_ingestor/cli/transcript.py
"""
CLI entrypoint for the transcript ingestor.

Thin adapter, no business logic.
Responsibilities:
- Parse arguments
- Build transport config
- Invoke the pipeline
- Print the JSON result on stdout

Structured logs from the pipeline go to stderr.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import typer

from transcript_ingestor.config import Config
from transcript_ingestor.errors import ConfigurationError
from transcript_ingestor.ingestor import get_video_details, to_payload
from transcript_ingestor.ingestor.schema import configuration_error_payload, missing_video_id_payload
from transcript_ingestor.logging_core.logger import configure_logging


app = typer.Typer(
    name="transcript-ingestor",
    help="Transcript Ingestor: title and captions for a YouTube video",
    no_args_is_help=True,
)


def render(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, indent=2)


@app.command()
def fetch(
    video_id: Optional[str] = typer.Argument(None, help="YouTube video id"),
    lang: str = typer.Option(Config.DEFAULT_LANG, "--lang", "-l", help="Caption language code"),
    insecure: bool = typer.Option(
        False, "--insecure", help="Skip TLS certificate verification"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Per-request timeout in seconds; 0 keeps the HTTP client default (default from TRANSCRIPT_TIMEOUT)"
    ),
    log_level: str = typer.Option(Config.LOG_LEVEL, "--log-level", help="Log level for stderr JSON logs"),
) -> None:
    """
    Print the title and transcript of a video as JSON.
    """
    if not video_id:
        typer.echo(render(missing_video_id_payload()))
        raise typer.Exit(code=1)

    logger = configure_logging(log_level)
    for problem in Config.validate():
        logger.warning(problem)

    try:
        config = Config.ingestor_config(verify_tls=False if insecure else None, timeout=timeout)
    except ConfigurationError as exc:
        typer.echo(render(configuration_error_payload(str(exc))))
        raise typer.Exit(code=2)

    result = get_video_details(video_id, lang=lang, config=config)
    typer.echo(render(to_payload(result)))


@app.command()
def serve(
    host: str = typer.Option(Config.HOST, "--host", help="Bind address"),
    port: int = typer.Option(Config.PORT, "--port", help="Bind port"),
) -> None:
    """
    Run the HTTP endpoint.
    """
    import uvicorn

    configure_logging(Config.LOG_LEVEL)
    uvicorn.run("transcript_ingestor.api.app:app", host=host, port=port, log_level="info")


if __name__ == "__main__":
    app()
