"""
Code generation for configured requests.

Renders equivalent request code for:
- cURL
- JavaScript (Fetch API)
- Python (requests)
- Rust (reqwest)
- Java (java.net.http.HttpClient)

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

from httpcraft.codegen.generators import (
    TARGET_ORDER,
    Target,
    generate,
    generate_all,
    render,
    render_all,
    render_block,
)

__all__ = [
    "TARGET_ORDER",
    "Target",
    "generate",
    "generate_all",
    "render",
    "render_all",
    "render_block",
]
