"""HTTP helpers: request construction and the response envelope."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from imagekit_metadata.config import Configuration
from imagekit_metadata.models import (
    ApiError,
    MalformedURLError,
    RequestCancelledError,
    ServiceError,
    TransportError,
    UnexpectedResponseError,
)

logger = logging.getLogger(__name__)

TimeoutTypes = Union[float, httpx.Timeout, None]


def build_path(prefix: str, path: str) -> str:
    """Join an API prefix and a relative path with exactly one slash."""
    if not prefix:
        return path
    return prefix.rstrip("/") + "/" + path.lstrip("/")


def build_request(
    client: httpx.Client,
    config: Configuration,
    method: str,
    path: str,
    query: Optional[Mapping[str, str]] = None,
    json_body: Any = None,
    timeout: TimeoutTypes = None,
) -> httpx.Request:
    """Build an authenticated request against the configured API prefix.

    Query parameters are encoded in sorted key order.

    Args:
        client: Client whose defaults (headers, timeout) the request inherits
        config: Credentials and API prefix
        method: HTTP method
        path: Path relative to the API prefix
        query: Query parameters, may be empty
        json_body: Payload serialized as JSON, if any
        timeout: Deadline for this request, defaults to the client's

    Returns:
        Request ready to be sent

    Raises:
        MalformedURLError: If the joined URL is not an absolute http(s) URL
    """
    url = build_path(config.api_prefix, path)
    kwargs: Dict[str, Any] = {}
    if query:
        kwargs["params"] = sorted(query.items())
    if json_body is not None:
        kwargs["json"] = json_body
    if timeout is not None:
        kwargs["timeout"] = timeout

    try:
        request = client.build_request(method, url, **kwargs)
    except httpx.InvalidURL as e:
        raise MalformedURLError(url, str(e)) from e

    if request.url.scheme not in ("http", "https") or not request.url.host:
        raise MalformedURLError(url, "expected an absolute http(s) URL")

    # BasicAuth yields the request once, with the Authorization header set.
    return next(httpx.BasicAuth(config.private_key, "").auth_flow(request))


@dataclass(frozen=True)
class ApiResponse:
    """Raw outcome of one HTTP call.

    The body is kept verbatim so it stays available when decoding fails.
    """
    status_code: int = 0
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.body)

    def parse_error(self) -> ApiError:
        """Build the error describing a non-2xx response.

        Structured ``{"message": ...}`` bodies become ``ServiceError``; anything
        else becomes ``UnexpectedResponseError`` carrying the raw body.
        """
        try:
            data = self.json()
        except ValueError:
            data = None

        if isinstance(data, dict) and isinstance(data.get("message"), str):
            help_text = data.get("help")
            return ServiceError(
                data["message"],
                self,
                help=help_text if isinstance(help_text, str) else "",
            )

        body_text = self.body.decode("utf-8", errors="replace")
        return UnexpectedResponseError(
            f"Unexpected response with status {self.status_code}: {body_text!r}", self
        )


def send(client: httpx.Client, request: httpx.Request) -> ApiResponse:
    """Send a request and read the whole response into an ``ApiResponse``.

    The underlying response is closed before returning, whatever happens.

    Raises:
        RequestCancelledError: If the request deadline expired
        TransportError: If the call failed without a response
    """
    logger.debug("Sending %s %s%s", request.method, request.url.host, request.url.path)
    try:
        response = client.send(request, stream=True)
    except httpx.TimeoutException as e:
        logger.warning("%s %s timed out: %s", request.method, request.url.path, e)
        raise RequestCancelledError(f"Request deadline exceeded: {e}") from e
    except httpx.HTTPError as e:
        logger.warning("%s %s failed: %s", request.method, request.url.path, e)
        raise TransportError(f"HTTP request failed: {e}") from e

    try:
        body = response.read()
    except httpx.TimeoutException as e:
        raise RequestCancelledError(f"Request deadline exceeded while reading body: {e}") from e
    except httpx.HTTPError as e:
        raise TransportError(f"Failed to read response body: {e}") from e
    finally:
        response.close()

    logger.debug("Received %s for %s %s", response.status_code, request.method, request.url.path)
    return ApiResponse(
        status_code=response.status_code,
        body=body,
        headers=dict(response.headers),
    )
