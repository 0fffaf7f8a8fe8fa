"""Binding declarations attached to a worker script on upload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

if TYPE_CHECKING:
    from .multipart import MultipartWriter

BindingBodyWriter = Callable[["MultipartWriter"], None]


class WorkerBinding(Protocol):
    """A named reference attached to a script at upload time.

    ``serialize`` returns the binding's metadata fragment and, for bindings
    that carry a payload beyond JSON, a callable that appends the payload part
    to the multipart body. Bindings are serialized independently of each other.
    """

    def serialize(self, name: str) -> tuple[dict[str, Any], Optional[BindingBodyWriter]]:
        ...


@dataclass(slots=True, frozen=True)
class WorkerInheritBinding:
    """Keep a binding from the previously deployed script, optionally renamed."""

    old_name: str = ""

    def serialize(self, name: str) -> tuple[dict[str, Any], Optional[BindingBodyWriter]]:
        meta: dict[str, Any] = {"name": name, "type": "inherit"}
        if self.old_name:
            meta["old_name"] = self.old_name
        return meta, None


@dataclass(slots=True, frozen=True)
class WorkerWasmModuleBinding:
    module: bytes

    def serialize(self, name: str) -> tuple[dict[str, Any], Optional[BindingBodyWriter]]:
        meta = {"name": name, "type": "wasm_module", "part": name}

        def write_module(writer: "MultipartWriter") -> None:
            writer.write_part(name, self.module, "application/wasm", filename=f"{name}.wasm")

        return meta, write_module
