"""
HTTP entry point.

Usage:
    uvicorn transcript_ingestor.api.app:app
    transcript-ingestor serve

GET or POST / with video_id and lang, taken from the query string or a
form-encoded POST body (the body wins), returns the pipeline result as
pretty-printed JSON. The status is always 200; failures are described in
the body.
"""

import json
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request, Response

from transcript_ingestor.config import Config
from transcript_ingestor.errors import ConfigurationError
from transcript_ingestor.ingestor import get_video_details, to_payload
from transcript_ingestor.ingestor.schema import configuration_error_payload, missing_video_id_payload
from transcript_ingestor.logging_core.logger import configure_logging


logger = configure_logging(Config.LOG_LEVEL)
for problem in Config.validate():
    logger.warning(problem)

app = FastAPI(
    title="Transcript Ingestor",
    description="Title and caption transcript for a YouTube video",
)


class PrettyJSONResponse(Response):
    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        return json.dumps(content, indent=2).encode("utf-8")


async def request_params(request: Request) -> Dict[str, str]:
    """Query parameters overlaid with form fields, like PHP's $_REQUEST."""
    params = dict(request.query_params)
    if request.method == "POST":
        form = await request.form()
        params.update({key: value for key, value in form.items() if isinstance(value, str)})
    return params


@app.api_route("/", methods=["GET", "POST"], response_class=PrettyJSONResponse)
def video_details(params: Dict[str, str] = Depends(request_params)) -> PrettyJSONResponse:
    """Return {videoTitle, transcript} or {error, message} for a video."""
    video_id = params.get("video_id")
    if not video_id:
        return PrettyJSONResponse(missing_video_id_payload())

    try:
        config = Config.ingestor_config()
    except ConfigurationError as exc:
        logger.error("Refusing request, configuration invalid: %s", exc)
        return PrettyJSONResponse(configuration_error_payload(str(exc)))

    lang = params.get("lang") or Config.DEFAULT_LANG
    payload: Dict[str, Any] = to_payload(get_video_details(video_id, lang=lang, config=config))
    logger.debug("Request served for %s", video_id)
    return PrettyJSONResponse(payload)
