"""Core components of the conductor engine."""

from .config import Config, config
from .exceptions import ConductorException, ElementNotFound, PredicateError
from .logger import Logger, log
from .conductor import Conductor

__all__ = [
    "Conductor",
    "ConductorException",
    "Config",
    "ElementNotFound",
    "Logger",
    "PredicateError",
    "config",
    "log",
]
