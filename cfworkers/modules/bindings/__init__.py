"""Binding exports"""

from .models import BindingBodyWriter, WorkerBinding, WorkerInheritBinding, WorkerWasmModuleBinding
from .multipart import MultipartWriter, format_multipart_body

__all__ = [
    "BindingBodyWriter",
    "MultipartWriter",
    "WorkerBinding",
    "WorkerInheritBinding",
    "WorkerWasmModuleBinding",
    "format_multipart_body",
]
