"""
HTTP request model and transport.

Provides:
- The request record shared by the executor and the code generators
- Header line splitting
- A blocking executor built on httpx that reports failures as results
- Console display of requests and responses

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

from httpcraft.http.client import (
    HTTPClient,
    HTTPRequest,
    HTTPResponse,
    HTTPResult,
    ResponseBuffer,
    iter_headers,
    split_header,
)

__all__ = [
    "HTTPClient",
    "HTTPRequest",
    "HTTPResponse",
    "HTTPResult",
    "ResponseBuffer",
    "iter_headers",
    "split_header",
]
