"""mc_compat: engine-agnostic plugin API shim.

Lets plugin code query semantic properties of game objects (namespaced
identifiers, localizable names, item colors) without importing engine
internals.  Two independent components:

- :mod:`mc_compat.variants`: variant identity and cached translations.
- :mod:`mc_compat.color`: item color metadata and dye palette conversion.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("mc-compat")
except PackageNotFoundError:
    __version__ = "0.1.0"
