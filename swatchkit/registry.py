"""Command auto-discovery and registration.

Scans swatchkit/commands/ for modules that define a `command` object of
type Command and collects them into a dict keyed by command name. Modules
whose name starts with '_' are helpers and are skipped.

Frozen binaries (PyInstaller) report no modules through pkgutil, so the
known module list below is used instead.
"""

import importlib
import pkgutil

from swatchkit.core.types import Command

_registry: dict[str, Command] = {}

_COMMAND_MODULES = [
    'contrast',
    'extract',
    'sample',
]


def discover() -> dict[str, Command]:
    """Import every command module once and return the registry."""
    if _registry:
        return _registry

    import swatchkit.commands as pkg

    modnames = [name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_')]
    for modname in modnames or _COMMAND_MODULES:
        module = importlib.import_module(f'swatchkit.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    return discover()
