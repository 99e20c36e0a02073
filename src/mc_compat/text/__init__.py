"""Localizable text handles for plugin-facing display names."""

from mc_compat.text.translation import Translation, load_lang_file

__all__ = ["Translation", "load_lang_file"]
