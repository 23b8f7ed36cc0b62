"""Tool module discovery.

Every module in this package that exposes a ``register(registry, settings)``
function contributes tools.  Modules are loaded in name order so the
resulting registry is identical across runs.
"""
from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Any, List

from registry import ToolRegistry

logger = logging.getLogger(__name__)

_SKIP = {"loader", "logger", "models", "browser_session"}


def load_tools(registry: ToolRegistry, settings: Any = None) -> List[str]:
    """Import tool modules and let each register its tools.

    Returns the names of the modules that registered tools.
    """
    package = importlib.import_module(__package__)
    loaded: List[str] = []
    for mod in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        if mod.name in _SKIP or mod.name.startswith("_"):
            continue
        module = importlib.import_module(f"{__package__}.{mod.name}")
        register = getattr(module, "register", None)
        if register is None:
            continue
        register(registry, settings)
        loaded.append(mod.name)
        logger.debug("Loaded tool module %s", mod.name)
    return loaded


def build_registry(settings: Any = None) -> ToolRegistry:
    """Create a registry populated with every available tool."""
    registry = ToolRegistry()
    load_tools(registry, settings)
    logger.info("Registered tools: %s", ", ".join(registry.names()))
    return registry
