"""
Interactive menu loop.

The shell owns the last configured request and hands it explicitly to the
executor, the display helpers and the code generators.

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

import logging
import re
from typing import Callable, TextIO

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from httpcraft import __version__
from httpcraft.codegen import TARGET_ORDER, generate, generate_all
from httpcraft.config import ShellConfig, get_config
from httpcraft.formatter import looks_like_json
from httpcraft.http.client import HTTPClient, HTTPRequest
from httpcraft.http.display import display_request, display_result, display_sending

logger = logging.getLogger(__name__)

MAIN_MENU = [
    "New Request",
    "View Last Request",
    "Generate Code",
    "Help",
    "Exit",
]

HELP_TEXT = """\
[bold]Features:[/bold]
  • Any HTTP method (GET, POST, PUT, DELETE, PATCH, ...)
  • Custom headers
  • Multiline JSON/body input
  • Follow redirects
  • Request timeout
  • Code generation for cURL, JavaScript, Python, Rust and Java
  • Colored and formatted output
  • Response time measurement

[bold]Usage:[/bold]
  1. Select 'New Request' from the menu
  2. Enter request details (URL, method, headers, body)
  3. For a body: type or paste it (multiline supported), end with {terminator} on a new line
  4. View the response
  5. Generate code snippets in various languages

[bold]Tips:[/bold]
  • A body starting with {{ or [ gets a Content-Type: application/json header automatically
  • Use {terminator} on a new line to finish multiline body input
"""

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_choice(text: str) -> int | None:
    """Parse a menu selection, returning None when it is not a number."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def parse_timeout(text: str) -> int:
    """Parse a timeout in seconds. Blank, invalid or negative input means 0."""
    value = parse_choice(text)
    if value is None or value < 0:
        return 0
    return value


def parse_yes_no(answer: str, default: bool) -> bool:
    """Interpret a y/n answer.

    With a yes default anything not starting with 'n' is yes; with a no
    default only answers starting with 'y' are yes.
    """
    answer = answer.strip()
    if not answer:
        return default
    if default:
        return answer[0] not in "nN"
    return answer[0] in "yY"


class InteractiveShell:
    """Menu-driven HTTP client session."""

    def __init__(
        self,
        console: Console | None = None,
        client: HTTPClient | None = None,
        config: ShellConfig | None = None,
        stream: TextIO | None = None,
    ):
        self.console = console or Console()
        self.config = config or get_config()
        self.client = client or HTTPClient(trace=self._trace)
        self.stream = stream
        self.request = HTTPRequest()

        self.actions: dict[int, Callable[[], None]] = {
            1: self.new_request,
            2: self.view_last_request,
            3: self.generate_code,
            4: self.show_help,
        }

    # Input

    def read_line(self, prompt: str = "") -> str:
        """Read one line of input, raising EOFError at end of input."""
        line = self.console.input(prompt, markup=False, stream=self.stream)
        if self.stream is not None:
            if not line:
                raise EOFError
            line = line.rstrip("\n")
        return line.rstrip("\r")

    def ask_yes_no(self, prompt: str, default: bool) -> bool:
        return parse_yes_no(self.read_line(prompt), default)

    def pause(self) -> None:
        self.read_line("\nPress Enter to continue...")

    def _trace(self, line: str) -> None:
        self.console.print(line, style="dim", markup=False, highlight=False)

    # Output

    def show_banner(self) -> None:
        self.console.print()
        self.console.print(Panel.fit(
            f"[bold]httpcraft[/bold] - Simple HTTP Client CLI v{__version__}",
            border_style="cyan",
        ))
        self.console.print()

    def show_menu(self) -> None:
        lines = "\n".join(f"  {i}. {label}" for i, label in enumerate(MAIN_MENU, 1))
        self.console.print(Panel(lines, title="Main Menu", title_align="left",
                                 border_style="blue", width=51))

    def show_help(self) -> None:
        self.console.print("\n[cyan]=== httpcraft Help ===[/cyan]\n")
        self.console.print(HELP_TEXT.format(terminator=escape(self.config.body_terminator)))

    # Actions

    def run(self) -> int:
        """Run the menu loop until the user exits. Returns the exit code."""
        self.show_banner()

        try:
            while True:
                self.show_menu()
                choice = parse_choice(self.read_line("Select option: "))

                if choice == 5:
                    self.console.print("\n[green]\\[✓] Thanks for using httpcraft![/green]\n")
                    return 0

                action = self.actions.get(choice)
                if action is None:
                    self.console.print("[red]\\[!] Invalid option[/red]")
                else:
                    action()

                self.pause()
        except EOFError:
            logger.debug("End of input, leaving menu loop")
            self.console.print()
            return 0

    def new_request(self) -> None:
        self.configure_request(self.request)
        self.execute_request(self.request)

    def execute_request(self, req: HTTPRequest) -> None:
        display_sending(req, self.console)
        result = self.client.request(req)
        display_result(result, self.console, theme=self.config.syntax_theme)

    def view_last_request(self) -> None:
        if not self.request.has_url:
            self.console.print("[red]\\[!] No request made yet[/red]")
            return
        display_request(self.request, self.console)

    def generate_code(self) -> None:
        if not self.request.has_url:
            self.console.print("[red]\\[!] No request to generate code from[/red]")
            return

        lines = [f"  {i}. {target.label}" for i, target in enumerate(TARGET_ORDER, 1)]
        lines.append(f"  {len(TARGET_ORDER) + 1}. All Languages")
        self.console.print()
        self.console.print(Panel("\n".join(lines), title="Generate Code", title_align="left",
                                 border_style="magenta", width=51))

        choice = parse_choice(self.read_line("\nSelect language: "))
        theme = self.config.syntax_theme

        if choice is not None and 1 <= choice <= len(TARGET_ORDER):
            generate(TARGET_ORDER[choice - 1], self.request, self.console, theme)
        elif choice == len(TARGET_ORDER) + 1:
            generate_all(self.request, self.console, theme)
        else:
            self.console.print("[red]\\[!] Invalid choice[/red]")

    # Request configuration

    def configure_request(self, req: HTTPRequest) -> None:
        """Prompt for every request field, updating req in place."""
        self.console.print("\n[cyan]=== Configure Request ===[/cyan]")

        req.url = self.read_line("\nEnter URL: ").strip()

        method = self.read_line("Enter Method (GET/POST/PUT/DELETE/PATCH) [GET]: ").strip()
        req.method = method.upper() or "GET"

        req.headers = []
        if self.ask_yes_no("\nAdd headers? (y/n) [n]: ", default=False):
            self.console.print("Enter headers (format: Key: Value, empty line to finish):")
            while True:
                line = self.read_line(f"  Header {len(req.headers) + 1}: ").rstrip()
                if not line.strip():
                    break
                req.headers.append(line)

        req.body = ""
        if req.method not in ("GET", "DELETE"):
            if self.ask_yes_no("\nAdd request body? (y/n) [n]: ", default=False):
                req.body = self.read_body()

                if looks_like_json(req.body) and not req.has_header("Content-Type"):
                    req.headers.append("Content-Type: application/json")
                    self.console.print(
                        "[yellow]\\[i] Auto-added Content-Type: application/json header[/yellow]"
                    )

        req.follow_redirects = self.ask_yes_no("\nFollow redirects? (y/n) [y]: ", default=True)
        req.timeout = parse_timeout(self.read_line("Timeout in seconds (0 for none) [0]: "))
        req.verbose = self.ask_yes_no("Verbose mode? (y/n) [n]: ", default=False)

        logger.debug(f"Configured {req.method} {req.url} with {len(req.headers)} header(s)")

    def read_body(self) -> str:
        """Read a multiline body, ending at the terminator line or end of input."""
        terminator = self.config.body_terminator
        self.console.print(
            f"\nEnter request body (multiline supported, end with {escape(terminator)} on new line):"
        )

        lines = []
        while True:
            try:
                line = self.read_line()
            except EOFError:
                break
            if line == terminator:
                break
            lines.append(line)

        return "\n".join(lines)
