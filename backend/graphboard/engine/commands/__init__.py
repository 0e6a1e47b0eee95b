"""Built-in canvas commands, one module per command."""

from __future__ import annotations

import importlib
import pkgutil

from graphboard.engine.registry import CommandRegistry, get_registry


def load_builtin_commands() -> CommandRegistry:
    """Import every command module so the @command decorators fire."""
    for _, module_name, _ in pkgutil.iter_modules(__path__):
        importlib.import_module(f"{__name__}.{module_name}")
    return get_registry()
