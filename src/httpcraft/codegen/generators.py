"""
Request code generators.

Each renderer turns an HTTPRequest into a snippet of idiomatic request code
for one target ecosystem. Renderers never fail: missing pieces of the
request simply drop out of the snippet.

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

from enum import Enum
from typing import Callable

from rich.console import Console
from rich.syntax import Syntax

from httpcraft.formatter import looks_like_json
from httpcraft.http.client import HTTPRequest, STANDARD_METHODS, iter_headers


class Target(str, Enum):
    """Code generation target."""
    CURL = "curl"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    RUST = "rust"
    JAVA = "java"

    @property
    def label(self) -> str:
        return TARGET_LABELS[self]

    @property
    def lexer(self) -> str:
        return "bash" if self is Target.CURL else self.value


TARGET_LABELS = {
    Target.CURL: "cURL",
    Target.JAVASCRIPT: "JavaScript (Fetch API)",
    Target.PYTHON: "Python (requests)",
    Target.RUST: "Rust (reqwest)",
    Target.JAVA: "Java (HttpClient)",
}


def render_curl(req: HTTPRequest) -> str:
    parts = [f"curl -X {req.method} '{req.url}'"]

    for key, value in iter_headers(req.headers):
        parts.append(f"-H '{key}: {value}'")

    if req.body:
        parts.append(f"-d '{req.body}'")
    if req.follow_redirects:
        parts.append("-L")
    if req.timeout > 0:
        parts.append(f"--max-time {req.timeout}")
    if req.verbose:
        parts.append("-v")

    return " \\\n  ".join(parts) + "\n"


def render_javascript(req: HTTPRequest) -> str:
    options = [f"  method: '{req.method}'"]

    headers = [f"    '{key}': '{value}'" for key, value in iter_headers(req.headers)]
    if headers:
        options.append("  headers: {\n" + ",\n".join(headers) + "\n  }")

    if req.body:
        if looks_like_json(req.body):
            options.append(f"  body: JSON.stringify({req.body})")
        else:
            options.append(f"  body: `{req.body}`")

    lines = [
        f"fetch('{req.url}', {{",
        ",\n".join(options),
        "})",
        "  .then(response => response.json())",
        "  .then(data => console.log(data))",
        "  .catch(error => console.error('Error:', error));",
    ]
    return "\n".join(lines) + "\n"


def render_python(req: HTTPRequest) -> str:
    lines = ["import requests", "import json", "", f"url = '{req.url}'"]
    args = ["url"]

    headers = [f"    '{key}': '{value}'," for key, value in iter_headers(req.headers)]
    if headers:
        lines += ["headers = {", *headers, "}"]
        args.append("headers=headers")

    if req.body:
        lines.append("")
        if looks_like_json(req.body):
            lines.append(f"payload = json.loads('''{req.body}''')")
            args.append("json=payload")
        else:
            lines.append(f"data = '''{req.body}'''")
            args.append("data=data")

    if req.method in STANDARD_METHODS:
        call = f"requests.{req.method.lower()}({', '.join(args)})"
    else:
        call = f"requests.request('{req.method}', {', '.join(args)})"

    lines += ["", f"response = {call}", "print(response.json())"]
    return "\n".join(lines) + "\n"


def render_rust(req: HTTPRequest) -> str:
    lines = [
        "use reqwest;",
        "",
        "#[tokio::main]",
        "async fn main() -> Result<(), Box<dyn std::error::Error>> {",
        "    let client = reqwest::Client::new();",
    ]

    if req.body:
        lines.append(f'    let body = r#"{req.body}"#;')
    lines.append("")

    if req.method in STANDARD_METHODS:
        lines.append(f'    let response = client.{req.method.lower()}("{req.url}")')
    else:
        lines.append(
            f'    let response = client.request(reqwest::Method::from_bytes(b"{req.method}")?, "{req.url}")'
        )

    for key, value in iter_headers(req.headers):
        lines.append(f'        .header("{key}", "{value}")')

    if req.body:
        lines.append("        .body(body)")

    lines += [
        "        .send()",
        "        .await?;",
        "",
        "    let body = response.text().await?;",
        '    println!("{}", body);',
        "    Ok(())",
        "}",
    ]
    return "\n".join(lines) + "\n"


def _java_body_call(req: HTTPRequest) -> str:
    """Builder call that sets the method and body publisher.

    HttpRequest.Builder.GET() and DELETE() take no publisher, so a GET or
    DELETE carrying a body falls back to method("GET", ...). The shell never
    asks for a body on those verbs; only requests built in code get here.
    """
    if req.body:
        publisher = "HttpRequest.BodyPublishers.ofString(jsonBody)"
    else:
        publisher = "HttpRequest.BodyPublishers.noBody()"

    if req.method in ("POST", "PUT"):
        return f".{req.method}({publisher})"
    if req.method in ("GET", "DELETE") and not req.body:
        return f".{req.method}()"
    return f'.method("{req.method}", {publisher})'


def render_java(req: HTTPRequest) -> str:
    lines = [
        "import java.net.URI;",
        "import java.net.http.HttpClient;",
        "import java.net.http.HttpRequest;",
        "import java.net.http.HttpResponse;",
        "",
        "public class HttpExample {",
        "    public static void main(String[] args) throws Exception {",
        "        HttpClient client = HttpClient.newHttpClient();",
    ]

    if req.body:
        lines.append('        String jsonBody = """')
        lines += [f"            {line}" for line in req.body.split("\n")]
        lines.append('            """;')
    lines.append("")

    lines += [
        "        HttpRequest.Builder builder = HttpRequest.newBuilder()",
        f'            .uri(URI.create("{req.url}"))',
    ]
    for key, value in iter_headers(req.headers):
        lines.append(f'            .header("{key}", "{value}")')
    lines.append(f"            {_java_body_call(req)};")

    lines += [
        "",
        "        HttpRequest request = builder.build();",
        "        HttpResponse<String> response = client.send(request,",
        "            HttpResponse.BodyHandlers.ofString());",
        "        System.out.println(response.body());",
        "    }",
        "}",
    ]
    return "\n".join(lines) + "\n"


RENDERERS: dict[Target, Callable[[HTTPRequest], str]] = {
    Target.CURL: render_curl,
    Target.JAVASCRIPT: render_javascript,
    Target.PYTHON: render_python,
    Target.RUST: render_rust,
    Target.JAVA: render_java,
}

# Order used by "all languages"
TARGET_ORDER = [Target.CURL, Target.JAVASCRIPT, Target.PYTHON, Target.RUST, Target.JAVA]


def render(target: Target, req: HTTPRequest) -> str:
    """Render request code for a single target."""
    return RENDERERS[target](req)


def render_block(target: Target, req: HTTPRequest) -> str:
    """Render a titled block as shown in the shell."""
    return f"=== {target.label} ===\n{render(target, req)}\n"


def render_all(req: HTTPRequest) -> str:
    """Render every target, in fixed order."""
    return "".join(render_block(target, req) for target in TARGET_ORDER)


def generate(target: Target, req: HTTPRequest, console: Console, theme: str = "monokai") -> None:
    """Print a titled, highlighted snippet for one target."""
    console.print(f"\n[green]=== {target.label} ===[/green]")
    console.print(Syntax(render(target, req), target.lexer, theme=theme, line_numbers=False))


def generate_all(req: HTTPRequest, console: Console, theme: str = "monokai") -> None:
    for target in TARGET_ORDER:
        generate(target, req, console, theme)
