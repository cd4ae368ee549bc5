"""Type-keyed dependency registry with construction-time injection.

Logging is disabled for the package by default; call
``logger.enable("injection")`` or ``injection.logging.setup_logging`` to see it.
"""

from loguru import logger

from .exceptions import InjectionError, MissingDependencyError
from .inject import Inject, provider
from .registry import (
    DependencyRegistry,
    get_registry,
    register,
    remove,
    remove_instance,
    reset,
    resolve,
    safe_resolve,
)
from .settings import InjectionSettings, get_settings

__version__ = "0.1.0"

logger.disable(__name__)

__all__ = [
    "DependencyRegistry",
    "Inject",
    "InjectionError",
    "InjectionSettings",
    "MissingDependencyError",
    "get_registry",
    "get_settings",
    "provider",
    "register",
    "remove",
    "remove_instance",
    "reset",
    "resolve",
    "safe_resolve",
]
