"""
httpcraft - Interactive HTTP client

An interactive command-line tool for building and sending HTTP requests,
pretty-printing JSON responses, and generating equivalent request code
for cURL, JavaScript, Python, Rust and Java.

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

__version__ = "1.0.0"
__author__ = "httpcraft contributors"
__copyright__ = "Copyright (c) 2025 httpcraft contributors"
