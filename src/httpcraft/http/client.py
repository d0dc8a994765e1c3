"""
HTTP request model and transport executor.

The request model is a flat record filled in by the interactive shell and
read by both the executor and the code generators. The executor issues one
blocking request through httpx and never raises on transport failure.

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterator

import httpx

logger = logging.getLogger(__name__)

# Methods that map onto a dedicated call in the generated code
STANDARD_METHODS = ("GET", "POST", "PUT", "DELETE")


def split_header(line: str) -> tuple[str, str] | None:
    """Split a raw 'Key: Value' header line on its first colon.

    Returns None when the line has no colon. Leading spaces of the value
    are stripped; the key is kept as typed.
    """
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return key, value.lstrip(" ")


def iter_headers(lines: list[str]) -> Iterator[tuple[str, str]]:
    """Yield (key, value) pairs in order, skipping lines without a colon."""
    for line in lines:
        pair = split_header(line)
        if pair is not None:
            yield pair


@dataclass
class HTTPRequest:
    """HTTP request configuration."""
    url: str = ""
    method: str = "GET"
    headers: list[str] = field(default_factory=list)  # raw "Key: Value" lines
    body: str = ""
    follow_redirects: bool = True
    verbose: bool = False
    timeout: int = 0  # seconds, 0 = no timeout

    @property
    def has_url(self) -> bool:
        return bool(self.url)

    @property
    def has_body(self) -> bool:
        return bool(self.body)

    def has_header(self, name: str) -> bool:
        """Check for a header by name, ignoring case."""
        prefix = f"{name.lower()}:"
        return any(h.lower().startswith(prefix) for h in self.headers)


class ResponseBufferError(Exception):
    """Raised when the response buffer cannot accept more data."""


@dataclass
class ResponseBuffer:
    """Growable sink for the raw bytes of one response body."""
    data: bytearray = field(default_factory=bytearray)

    def write(self, chunk: bytes) -> int:
        """Append a chunk, returning the number of bytes accepted."""
        try:
            self.data.extend(chunk)
        except MemoryError:
            logger.error("Not enough memory!")
            return 0
        return len(chunk)

    @property
    def size(self) -> int:
        return len(self.data)

    def text(self, encoding: str = "utf-8") -> str:
        return self.data.decode(encoding, errors="replace")


@dataclass
class HTTPResponse:
    """HTTP response details."""
    status_code: int
    status_text: str
    headers: dict[str, str]
    body: str
    body_bytes: bytes
    elapsed_ms: float
    http_version: str = "HTTP/1.1"
    content_type: str | None = None
    content_length: int = 0

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    @property
    def looks_like_json(self) -> bool:
        return self.body[:1] in ("{", "[")


@dataclass
class HTTPResult:
    """Result of an HTTP request."""
    success: bool = False
    request: HTTPRequest | None = None
    response: HTTPResponse | None = None
    error: str | None = None


class HTTPClient:
    """Issues one synchronous request per call.

    A fresh httpx.Client is opened and closed around every request, so no
    connection state survives between menu iterations.
    """

    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        trace: Callable[[str], None] | None = None,
    ):
        self.transport = transport
        self.trace = trace

    def _event_hooks(self, req: HTTPRequest) -> dict[str, list]:
        if not req.verbose or self.trace is None:
            return {}

        trace = self.trace

        def log_request(request: httpx.Request) -> None:
            trace(f"> {request.method} {request.url}")
            for name, value in request.headers.items():
                trace(f"> {name}: {value}")
            trace(">")

        def log_response(response: httpx.Response) -> None:
            trace(f"< {response.http_version} {response.status_code} {response.reason_phrase}")
            for name, value in response.headers.items():
                trace(f"< {name}: {value}")
            trace("<")

        return {"request": [log_request], "response": [log_response]}

    def _build_client(self, req: HTTPRequest) -> httpx.Client:
        timeout = httpx.Timeout(float(req.timeout)) if req.timeout > 0 else httpx.Timeout(None)
        return httpx.Client(
            timeout=timeout,
            follow_redirects=req.follow_redirects,
            transport=self.transport,
            event_hooks=self._event_hooks(req),
        )

    def request(self, req: HTTPRequest) -> HTTPResult:
        """Make an HTTP request."""
        result = HTTPResult(request=req)
        buffer = ResponseBuffer()

        logger.info(f"Sending {req.method} request to {req.url}")

        try:
            headers = list(iter_headers(req.headers))
            content = req.body.encode("utf-8") if req.body else None

            with self._build_client(req) as client:
                start_time = time.time()

                with client.stream(
                    req.method,
                    req.url,
                    headers=headers,
                    content=content,
                ) as response:
                    for chunk in response.iter_bytes():
                        if buffer.write(chunk) != len(chunk):
                            raise ResponseBufferError("Failed writing received data to buffer")

                    elapsed_ms = (time.time() - start_time) * 1000
                    body_bytes = bytes(buffer.data)

                    result.response = HTTPResponse(
                        status_code=response.status_code,
                        status_text=response.reason_phrase,
                        headers=dict(response.headers),
                        body=buffer.text(response.encoding or "utf-8"),
                        body_bytes=body_bytes,
                        elapsed_ms=elapsed_ms,
                        http_version=response.http_version,
                        content_type=response.headers.get("content-type"),
                        content_length=len(body_bytes),
                    )

            result.success = True
            logger.debug(
                f"{req.method} {req.url} -> {result.response.status_code} "
                f"in {result.response.elapsed_ms:.2f}ms"
            )

        except httpx.ConnectError as e:
            result.error = f"Connection failed: {e}"
        except httpx.TimeoutException:
            result.error = f"Request timed out after {req.timeout}s"
        except httpx.TooManyRedirects as e:
            result.error = f"Too many redirects: {e}"
        except httpx.UnsupportedProtocol as e:
            result.error = f"Unsupported protocol: {e}"
        except httpx.InvalidURL as e:
            result.error = f"Invalid URL: {e}"
        except ResponseBufferError as e:
            result.error = str(e)
        except Exception as e:
            result.error = str(e) or e.__class__.__name__

        if result.error:
            logger.warning(f"{req.method} {req.url} failed: {result.error}")

        return result
