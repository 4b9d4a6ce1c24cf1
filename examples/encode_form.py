import sys

import click
from urlform import (
    add_stderr_logger,
    append_query,
    build_multipart,
    encode_map,
    percent_encode,
)


def show(label: str, value, color: str) -> None:
    click.secho(f"{label}: {value}", fg=color)


def main() -> None:
    add_stderr_logger()

    params = {"q": "hello world", "lang": "日本語", "debug": None}
    show("Form body", encode_map(params), "yellow")
    show("Query URL", append_query("https://httpbin.org/get", params), "green")
    show("Percent-encoded", percent_encode("a b*~c"), "blue")

    # Upload this script itself as the file part.
    content_type, body = build_multipart({"name": "Bob"}, {"script": __file__})
    show("Content-Type", content_type, "magenta")
    show("Body size", f"{len(body)} bytes", "magenta")
    sys.stdout.buffer.write(body[:400] + b"\n")


if __name__ == "__main__":
    main()
