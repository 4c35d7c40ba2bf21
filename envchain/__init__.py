"""
envchain: load KEY = "value" files into an Env, with chained includes.
"""
from .env import Env
from .loader import LEGACY_LOAD_KEY, LOAD_KEY, LOAD_KEYS, InclusionCycleError, LineKind, ParsedLine, load, parse_line
from .logging import configure_logging

__all__ = [
    "Env",
    "LEGACY_LOAD_KEY",
    "LOAD_KEY",
    "LOAD_KEYS",
    "InclusionCycleError",
    "LineKind",
    "ParsedLine",
    "load",
    "parse_line",
    "configure_logging",
]
