"""Instantiate a link backend by type name."""

from ._AbstractBackend import _AbstractBackend
from ._symlink._Impl import _Impl as _SymlinkImpl
from ._windows._Impl import _Impl as _WindowsImpl

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[_AbstractBackend]] = {
    "symlink": _SymlinkImpl,
    "windows": _WindowsImpl,
}


def get_backend(backend_type: str) -> _AbstractBackend:
    """Return a backend instance for ``backend_type``.

    Raises:
        ValueError: If the backend type is unknown
    """
    backend_class = _BACKEND_REGISTRY.get(backend_type)
    if backend_class is None:
        raise ValueError(f"Unknown link backend: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
    return backend_class()
