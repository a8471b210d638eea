"""Platform abstraction layer."""

from .files import atomic_write_text, clear_directory
from .process import ProcessError, run_silent

__all__ = [
    # files
    "atomic_write_text",
    "clear_directory",
    # process
    "ProcessError",
    "run_silent",
]
