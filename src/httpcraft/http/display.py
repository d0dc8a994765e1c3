"""
Console rendering for requests and responses.

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from httpcraft.formatter import format_json
from httpcraft.http.client import HTTPRequest, HTTPResult


def display_sending(req: HTTPRequest, console: Console) -> None:
    """Print the notice shown before a request goes out."""
    console.print(f"\n[yellow]\\[→] Sending {escape(req.method)} request to {escape(req.url)}...[/yellow]",
                  highlight=False)


def display_result(result: HTTPResult, console: Console, theme: str = "monokai") -> None:
    """Print elapsed time, status code and body, or the failure line."""
    if not result.success or result.response is None:
        console.print(f"[red]\\[✗] Request failed: {escape(str(result.error))}[/red]", highlight=False)
        return

    resp = result.response
    status_color = "green" if resp.is_success else "red"

    console.print(f"[green]\\[✓] Response received in {resp.elapsed_ms:.2f}ms[/green]")
    console.print(f"[{status_color}]\\[i] Status Code: {resp.status_code}[/{status_color}]")
    console.print("\n[cyan]--- Response Body ---[/cyan]")

    if resp.looks_like_json:
        formatted = format_json(resp.body)
        console.print(Syntax(formatted, "json", theme=theme, line_numbers=False))
    else:
        console.print(resp.body, markup=False, highlight=False)

    console.print("[cyan]---------------------[/cyan]\n")


def display_request(req: HTTPRequest, console: Console) -> None:
    """Print the stored request."""
    console.print("\n[cyan]=== Last Request ===[/cyan]")
    console.print(f"[bold]URL:[/bold] {escape(req.url)}", highlight=False)
    console.print(f"[bold]Method:[/bold] {escape(req.method)}", highlight=False)

    if req.headers:
        console.print("[bold]Headers:[/bold]")
        for line in req.headers:
            console.print(f"  {line}", markup=False, highlight=False)

    if req.body:
        console.print("[bold]Body:[/bold]")
        console.print(req.body, markup=False, highlight=False)

    console.print(f"[bold]Follow Redirects:[/bold] {'Yes' if req.follow_redirects else 'No'}")
    console.print(f"[bold]Timeout:[/bold] {req.timeout} seconds")
    console.print(f"[bold]Verbose:[/bold] {'Yes' if req.verbose else 'No'}")
    console.print()
