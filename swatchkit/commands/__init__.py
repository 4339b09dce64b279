"""swatchkit commands.

Every module here that defines a `command` object is registered by
swatchkit.registry.discover(). The imports below keep the modules visible
to PyInstaller, which cannot see them through pkgutil.iter_modules.
"""

# keep in sync with registry._COMMAND_MODULES
import swatchkit.commands.contrast as _contrast  # noqa: F401
import swatchkit.commands.extract as _extract  # noqa: F401
import swatchkit.commands.sample as _sample  # noqa: F401
