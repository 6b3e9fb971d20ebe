"""Test configuration for pytest."""

from typing import Callable, Generator, List, Optional, Tuple, Union

import httpx
import pytest

from imagekit_metadata.config import Configuration
from imagekit_metadata.metadata_api import MetadataAPI

PRIVATE_KEY = "private_XxZH+I8BfOoIsY0M9CQtS4nyNSk="
PUBLIC_KEY = "public_fGfgv45RjwmkbzGMRy1gKTcHf4M="
URL_ENDPOINT = "https://ik.imagekit.io/dk1m7xkgi/"
API_PREFIX = "https://api.imagekit.test/v1/"

METADATA_BODY = (
    '{"height":801,"width":597,"size":59718,"format":"jpg","hasColorProfile":true,'
    '"quality":0,"density":72,"hasTransparency":false,"exif":{},"pHash":"85d07f1fe4ae8be2"}'
)

CUSTOM_FIELDS_BODY = (
    '[{"id":"629f6b437eb0fe6f1b66d864","name":"price","label":"Price","schema":{"type":"Number",'
    '"isValueRequired":false,"minValue":1,"maxValue":1000}},'
    '{"id":"629f6b6d7eb0fe344f66e1b6","name":"country","label":"Country","schema":{"type":"SingleSelect",'
    '"isValueRequired":false,"selectOptions":["USA","Canada"]}},'
    '{"id":"62a8764d663ef721e93f4ea9","name":"clearance","label":"Clearance","schema":{"type":"MultiSelect",'
    '"selectOptions":["one","two"]}},'
    '{"id":"62a876b1663ef7728f3f5348","name":"mileage","label":"Mileage","schema":{"type":"Number"}},'
    '{"id":"62a8966b663ef736f841fe28","name":"speed","label":"Speed","schema":{"type":"Number",'
    '"defaultValue":100,"minValue":1,"maxValue":120}}]'
)


@pytest.fixture
def metadata_body() -> str:
    """Metadata response of an image without EXIF data."""
    return METADATA_BODY


@pytest.fixture
def custom_fields_body() -> str:
    """Listing of five custom fields."""
    return CUSTOM_FIELDS_BODY


class RecordingHandler:
    """MockTransport handler answering every request the same way."""

    def __init__(self, status_code: int = 200, body: Union[str, bytes] = "",
                 exc: Optional[Exception] = None):
        self.status_code = status_code
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.exc = exc
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, content=self.body)


@pytest.fixture
def config() -> Configuration:
    """Create a configuration with test credentials."""
    return Configuration(
        private_key=PRIVATE_KEY,
        public_key=PUBLIC_KEY,
        url_endpoint=URL_ENDPOINT,
        api_prefix=API_PREFIX,
    )


@pytest.fixture
def make_api(
    config: Configuration,
) -> Generator[Callable[..., Tuple[MetadataAPI, RecordingHandler]], None, None]:
    """Build a MetadataAPI whose transport is a RecordingHandler."""
    clients = []

    def factory(status_code: int = 200, body: Union[str, bytes] = "",
                exc: Optional[Exception] = None) -> Tuple[MetadataAPI, RecordingHandler]:
        handler = RecordingHandler(status_code, body, exc)
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return MetadataAPI(config, client=client), handler

    yield factory
    for client in clients:
        client.close()
