"""
JSON re-indenting formatter.

Pretty-prints raw JSON text in a single pass without parsing it, so
responses that are almost-JSON still come out readable.

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

from httpcraft.formatter.core import (
    State,
    format_json,
    looks_like_json,
)

__all__ = [
    "State",
    "format_json",
    "looks_like_json",
]
