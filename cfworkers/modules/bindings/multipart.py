"""multipart/form-data assembly for script uploads with bindings."""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any, Mapping, Optional

from cfworkers.modules.common.exceptions import BindingSerializationError

from .models import BindingBodyWriter, WorkerBinding

logger = logging.getLogger(__name__)

SCRIPT_PART_NAME = "script"
METADATA_PART_NAME = "metadata"


class MultipartWriter:
    """Accumulates form-data parts into one in-memory body."""

    def __init__(self, boundary: Optional[str] = None) -> None:
        self.boundary = boundary or "----WorkersBoundary" + uuid.uuid4().hex
        self._body = bytearray()
        self._closed = False

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    def _add_line(self, line: str) -> None:
        self._body.extend(line.encode("utf-8"))

    def write_part(
        self,
        name: str,
        content: bytes,
        content_type: str,
        filename: Optional[str] = None,
    ) -> None:
        if self._closed:
            raise ValueError("multipart body already closed")
        disposition = f'form-data; name="{name}"'
        if filename:
            disposition += f'; filename="{filename}"'
        self._add_line(f"--{self.boundary}\r\n")
        self._add_line(f"Content-Disposition: {disposition}\r\n")
        self._add_line(f"Content-Type: {content_type}\r\n\r\n")
        self._body.extend(content)
        self._body.extend(b"\r\n")

    def close(self) -> bytes:
        if not self._closed:
            self._add_line(f"--{self.boundary}--\r\n")
            self._closed = True
        return bytes(self._body)


def script_part_name(bindings: Mapping[str, Any]) -> str:
    """Pick a part name for the script that no binding name uses."""
    name = SCRIPT_PART_NAME
    while name in bindings:
        name += "_"
    return name


def format_multipart_body(
    script: str,
    bindings: Mapping[str, WorkerBinding],
    *,
    boundary: Optional[str] = None,
) -> tuple[str, bytes]:
    """Return ``(content_type, body)`` for an upload carrying bindings."""
    body_part = script_part_name(bindings)

    fragments: list[dict[str, Any]] = []
    body_writers: list[BindingBodyWriter] = []
    for name, binding in bindings.items():
        try:
            fragment, body_writer = binding.serialize(name)
            json.dumps(fragment, allow_nan=False)
        except Exception as exc:
            raise BindingSerializationError(f"binding {name!r}: {exc}") from exc
        fragments.append(fragment)
        if body_writer is not None:
            body_writers.append(body_writer)

    metadata = json.dumps(
        {"body_part": body_part, "bindings": fragments}, allow_nan=False
    ).encode("utf-8")

    writer = MultipartWriter(boundary)
    writer.write_part(METADATA_PART_NAME, metadata, "application/json")
    writer.write_part(body_part, script.encode("utf-8"), "application/javascript")
    for body_writer in body_writers:
        body_writer(writer)

    body = writer.close()
    logger.debug(
        "Assembled multipart body: %d bindings, %d extra parts, %d bytes",
        len(fragments),
        len(body_writers),
        len(body),
    )
    return writer.content_type, body


__all__ = [
    "METADATA_PART_NAME",
    "MultipartWriter",
    "SCRIPT_PART_NAME",
    "format_multipart_body",
    "script_part_name",
]
