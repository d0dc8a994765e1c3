"""
httpcraft command-line entry point.

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

import logging
import sys

import click
from rich.console import Console

from httpcraft import __version__
from httpcraft.config import get_config
from httpcraft.logging_config import configure_logging
from httpcraft.shell import InteractiveShell


@click.command()
@click.option("--debug", is_flag=True, help="Enable debug logging on stderr")
@click.option("--log-file/--no-log-file", default=False,
              help="Also write logs to ~/.httpcraft/logs/httpcraft.log")
@click.version_option(__version__, prog_name="httpcraft")
def main(debug: bool, log_file: bool):
    """Interactive HTTP client.

    Build a request through the menu, send it, inspect the formatted
    response and generate equivalent code for cURL, JavaScript, Python,
    Rust or Java.

    \b
    Examples:
        httpcraft
        httpcraft --debug
        httpcraft --log-file
    """
    config = get_config()
    configure_logging(
        debug=debug,
        log_to_file=log_file,
        level=config.log_level,
        log_dir=config.log_dir,
    )
    logger = logging.getLogger(__name__)
    logger.debug(f"Starting httpcraft {__version__}")

    console = Console()
    shell = InteractiveShell(console=console, config=config)

    try:
        code = shell.run()
    except KeyboardInterrupt:
        console.print("\n\n[green]\\[✓] Thanks for using httpcraft![/green]\n")
        code = 0

    sys.exit(code)


if __name__ == "__main__":
    main()
