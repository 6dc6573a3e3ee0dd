from importlib.resources import files

from .core import DataRange, make
from .formatting import decimals, format_data, format_float
from .grid import (
    align,
    ceil_index,
    ensure_finite,
    floor_index,
    precision_ratio,
    snap,
    step_count,
)
from .stepsize import auto_stepsize, candidates, decade_exponent
from .util import INFINITE_STEPS, NICE_STEPS

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "DataRange",
    "make",
    "auto_stepsize",
    "candidates",
    "decade_exponent",
    "snap",
    "floor_index",
    "ceil_index",
    "step_count",
    "precision_ratio",
    "align",
    "ensure_finite",
    "decimals",
    "format_data",
    "format_float",
    "INFINITE_STEPS",
    "NICE_STEPS",
    "docs",
]
