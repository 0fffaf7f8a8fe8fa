import re
from typing import Any


def parse_multipart(content_type: str, body: bytes) -> list[dict[str, Any]]:
    """Split a form-data body into ``{"name", "headers", "content"}`` dicts."""
    boundary = content_type.split("boundary=", 1)[1]
    delimiter = b"--" + boundary.encode("ascii")
    assert body.endswith(delimiter + b"--\r\n")
    parts = []
    for chunk in body.split(delimiter)[1:-1]:
        assert chunk.startswith(b"\r\n") and chunk.endswith(b"\r\n")
        raw_headers, content = chunk[2:-2].split(b"\r\n\r\n", 1)
        headers = {}
        for line in raw_headers.decode("utf-8").split("\r\n"):
            key, value = line.split(":", 1)
            headers[key.strip().lower()] = value.strip()
        name = re.search(r'name="([^"]*)"', headers["content-disposition"]).group(1)
        parts.append({"name": name, "headers": headers, "content": content})
    return parts
