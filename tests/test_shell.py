from __future__ import annotations

import io

import httpx
import pytest
from rich.console import Console

from httpcraft.codegen import TARGET_ORDER
from httpcraft.config import ShellConfig
from httpcraft.http import HTTPClient, HTTPRequest
from httpcraft.shell import InteractiveShell, parse_choice, parse_timeout, parse_yes_no


def make_shell(console: Console, script: str, handler=None, config: ShellConfig | None = None):
    seen: list[httpx.Request] = []

    def default_handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": 7})

    client = HTTPClient(transport=httpx.MockTransport(handler or default_handler))
    shell = InteractiveShell(
        console=console,
        client=client,
        config=config or ShellConfig(),
        stream=io.StringIO(script),
    )
    return shell, seen


@pytest.mark.parametrize(
    ("text", "expected"),
    [("1", 1), (" 3\n", 3), ("4abc", 4), ("abc", None), ("", None)],
)
def test_parse_choice(text: str, expected) -> None:
    assert parse_choice(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("", 0), ("0", 0), ("30", 30), ("5s", 5), ("-3", 0), ("soon", 0)],
)
def test_parse_timeout(text: str, expected: int) -> None:
    assert parse_timeout(text) == expected


def test_parse_yes_no() -> None:
    assert parse_yes_no("", default=True) is True
    assert parse_yes_no("", default=False) is False
    assert parse_yes_no("yes", default=False) is True
    assert parse_yes_no("maybe", default=False) is False
    assert parse_yes_no("maybe", default=True) is True
    assert parse_yes_no("No", default=True) is False


def test_full_session(console: Console, output) -> None:
    script = "\n".join([
        "1",                        # New Request
        "http://api.test/items",
        "post",
        "y",                        # add headers
        "X-Token:   abc",
        "",
        "y",                        # add body
        '{"name":"widget",',
        ' "tags":["a"]}',
        "@@@",
        "n",                        # follow redirects
        "10",                       # timeout
        "n",                        # verbose
        "",                         # press enter
        "2",                        # View Last Request
        "",
        "3",                        # Generate Code
        "1",                        # cURL
        "",
        "5",                        # Exit
    ]) + "\n"
    shell, seen = make_shell(console, script)

    assert shell.run() == 0

    req = shell.request
    assert req.url == "http://api.test/items"
    assert req.method == "POST"
    assert req.headers == ["X-Token:   abc", "Content-Type: application/json"]
    assert req.body == '{"name":"widget",\n "tags":["a"]}'
    assert req.follow_redirects is False
    assert req.timeout == 10
    assert req.verbose is False

    assert seen[0].method == "POST"
    assert seen[0].headers["X-Token"] == "abc"
    assert seen[0].content == req.body.encode()

    text = output.getvalue()
    assert "Auto-added Content-Type: application/json header" in text
    assert "[i] Status Code: 201" in text
    assert '"id": 7' in text
    assert "=== Last Request ===" in text
    assert "curl -X POST 'http://api.test/items'" in text
    assert "-H 'X-Token: abc'" in text
    assert "Thanks for using httpcraft!" in text


def test_get_request_never_prompts_for_body(console: Console, output) -> None:
    script = "1\nhttp://api.test\n\nn\n\n\n\n\n5\n"
    shell, seen = make_shell(console, script)

    assert shell.run() == 0
    assert shell.request.method == "GET"
    assert shell.request.body == ""
    assert shell.request.follow_redirects is True
    assert shell.request.timeout == 0
    assert "Add request body" not in output.getvalue()
    assert len(seen) == 1


def test_existing_content_type_is_not_duplicated(console: Console) -> None:
    script = "1\nhttp://api.test\nPUT\ny\ncontent-type: application/vnd.api+json\n\ny\n[1]\n@@@\n\n\n\n\n5\n"
    shell, _ = make_shell(console, script)

    shell.run()

    assert shell.request.headers == ["content-type: application/vnd.api+json"]
    assert shell.request.body == "[1]"


def test_plain_body_gets_no_content_type(console: Console) -> None:
    script = "1\nhttp://api.test\nPOST\nn\ny\nhello\nworld\n@@@\n\n\n\n\n5\n"
    shell, _ = make_shell(console, script)

    shell.run()

    assert shell.request.headers == []
    assert shell.request.body == "hello\nworld"


def test_custom_body_terminator(console: Console) -> None:
    script = "1\nhttp://api.test\nPOST\nn\ny\nline @@@\n@@@ \nEND\n\n\n\n\n5\n"
    shell, _ = make_shell(console, script, config=ShellConfig(body_terminator="END"))

    shell.run()

    assert shell.request.body == "line @@@\n@@@ "


def test_new_request_replaces_previous_one(console: Console) -> None:
    script = (
        "1\nhttp://api.test/a\nPOST\ny\nA: 1\n\ny\nx\n@@@\n\n\n\n\n"
        "1\nhttp://api.test/b\ndelete\nn\n\n\n\n\n"
        "5\n"
    )
    shell, seen = make_shell(console, script)

    shell.run()

    assert shell.request.url == "http://api.test/b"
    assert shell.request.method == "DELETE"
    assert shell.request.headers == []
    assert shell.request.body == ""
    assert [r.method for r in seen] == ["POST", "DELETE"]


def test_invalid_option_keeps_looping(console: Console, output) -> None:
    shell, _ = make_shell(console, "9\n\nabc\n\n5\n")

    assert shell.run() == 0

    text = output.getvalue()
    assert text.count("Invalid option") == 2
    assert text.count("Main Menu") == 3


def test_view_and_generate_need_a_request(console: Console, output) -> None:
    shell, _ = make_shell(console, "2\n\n3\n\n5\n")

    shell.run()

    text = output.getvalue()
    assert "No request made yet" in text
    assert "No request to generate code from" in text


def test_generate_all_languages(console: Console, output) -> None:
    shell, _ = make_shell(console, "3\n6\n\n5\n")
    shell.request = HTTPRequest(url="http://api.test", method="PATCH")

    shell.run()

    text = output.getvalue()
    positions = [text.index(f"=== {target.label} ===") for target in TARGET_ORDER]
    assert positions == sorted(positions)


def test_generate_invalid_choice(console: Console, output) -> None:
    shell, _ = make_shell(console, "3\n7\n\n5\n")
    shell.request = HTTPRequest(url="http://api.test")

    shell.run()

    assert "Invalid choice" in output.getvalue()


def test_transport_failure_returns_to_menu(console: Console, output) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    shell, _ = make_shell(console, "1\nhttp://down.test\n\nn\n\n\n\n\n5\n", handler=handler)

    assert shell.run() == 0

    text = output.getvalue()
    assert "[✗] Request failed: Connection failed: Connection refused" in text
    assert text.count("Main Menu") == 2


def test_help(console: Console, output) -> None:
    shell, _ = make_shell(console, "4\n\n5\n")

    shell.run()

    assert "end with @@@ on a new line" in output.getvalue()


def test_end_of_input_exits_cleanly(console: Console) -> None:
    shell, _ = make_shell(console, "")

    assert shell.run() == 0


def test_end_of_input_mid_request(console: Console) -> None:
    shell, seen = make_shell(console, "1\nhttp://api.test\n")

    assert shell.run() == 0
    assert seen == []
