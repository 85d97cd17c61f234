"""API routers."""

from tabprobe.api.routers import upload

__all__ = [
    "upload",
]
