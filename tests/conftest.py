from __future__ import annotations

from typing import Callable, Dict, List, Union

import httpx
import pytest

from transcript_ingestor.extraction import Fetcher, IngestorConfig


VIDEO_ID = "abc123"
WATCH_URL = f"https://www.youtube.com/watch?v={VIDEO_ID}"
EN_TRACK_URL = "https://www.youtube.com/api/timedtext?v=abc123&lang=en"
FR_TRACK_URL = "https://www.youtube.com/api/timedtext?v=abc123&lang=fr&kind=asr"

CAPTION_LISTING = (
    '"captionTracks":['
    '{"baseUrl":"https://www.youtube.com/api/timedtext?v=abc123\\u0026lang=en",'
    '"name":{"simpleText":"English"},"vssId":".en","languageCode":"en","isTranslatable":true},'
    '{"baseUrl":"https://www.youtube.com/api/timedtext?v=abc123\\u0026lang=fr\\u0026kind=asr",'
    '"name":{"simpleText":"French (auto-generated)"},"vssId":"a.fr","languageCode":"fr","kind":"asr"}'
    '],"audioTracks":[{"captionTrackIndices":[0,1]}]'
)


def watch_page(title: str = "Never Gonna &amp; Give - YouTube", listing: str = CAPTION_LISTING) -> str:
    return (
        "<!DOCTYPE html><html><head>"
        f"<title>{title}</title>"
        '<meta name="description" content="a video">'
        "</head><body><script>var ytInitialPlayerResponse = "
        '{"captions":{"playerCaptionsTracklistRenderer":{' + listing + "}}};"
        "</script></body></html>"
    )


EN_PAYLOAD = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="0.5" dur="1.2">Hello &amp; welcome</text>'
    '<text start="1.7" dur="0.4">\n</text>'
    '<text start="2.1" dur="3">it&#39;s <font color="#E5E5E5">great</font></text>'
    "</transcript>"
)

FR_PAYLOAD = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="0" dur="1">Bonjour &agrave; tous</text>'
    "</transcript>"
)


Route = Union[str, tuple, Exception]


class RecordingTransport(httpx.MockTransport):
    """MockTransport keyed by URL that remembers what was requested."""

    def __init__(self, routes: Dict[str, Route]):
        self.routes = routes
        self.requested: List[str] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        route = self.routes.get(url)
        if route is None:
            raise httpx.ConnectError(f"no route to {url}", request=request)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, tuple):
            status, body = route
            return httpx.Response(status, text=body)
        return httpx.Response(200, text=route)


@pytest.fixture
def make_fetcher() -> Callable[..., Fetcher]:
    def factory(routes: Dict[str, Route], config: IngestorConfig | None = None) -> Fetcher:
        return Fetcher(config or IngestorConfig(), transport=RecordingTransport(routes))

    return factory
