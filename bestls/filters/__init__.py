"""Entry filters: size parsing, glob and extension matching, and the chain."""

from __future__ import annotations

from .chain import FilterConfig, apply_filters, build_filter_config
from .extension import ExtensionMatcher, normalize_extension, parse_extension_list
from .glob import GlobMatcher, compile_glob
from .size import parse_size, parse_size_or_none

__all__ = [
    "FilterConfig",
    "apply_filters",
    "build_filter_config",
    "ExtensionMatcher",
    "normalize_extension",
    "parse_extension_list",
    "GlobMatcher",
    "compile_glob",
    "parse_size",
    "parse_size_or_none",
]
