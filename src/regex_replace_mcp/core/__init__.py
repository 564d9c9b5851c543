"""Core algorithms: replacement templates and glob expansion."""

from .globbing import expand_glob
from .template import compile_template, escape_replacement

__all__ = [
    "compile_template",
    "escape_replacement",
    "expand_glob",
]
