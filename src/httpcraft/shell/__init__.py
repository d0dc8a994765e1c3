"""
Interactive shell: main menu, request prompts and code generation menu.

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

from httpcraft.shell.menu import (
    InteractiveShell,
    parse_choice,
    parse_timeout,
    parse_yes_no,
)

__all__ = [
    "InteractiveShell",
    "parse_choice",
    "parse_timeout",
    "parse_yes_no",
]
