"""Link backends - read and write platform shortcut files."""

from ._AbstractBackend import _AbstractBackend
from .detect_backend import detect_backend
from .get_backend import get_backend

__all__ = ["_AbstractBackend", "detect_backend", "get_backend"]
