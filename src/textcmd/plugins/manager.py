"""Plugin discovery, loading, and syntax catalog assembly.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery from ``.textcmd/plugins/``.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import pluggy
from pydantic import ValidationError

from textcmd.domain.syntax import LanguageSyntax
from textcmd.plugins.builtins.languages import BuiltinLanguagesPlugin
from textcmd.plugins.catalog import SyntaxCatalog
from textcmd.plugins.hookspecs import TextcmdHookSpec

PROJECT_NAME = "textcmd"
ENTRY_POINT_GROUP = "textcmd.plugins"
BUILTIN_PLUGIN_NAME = "builtin-languages"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery and collects their language syntax."""

    def __init__(self, *, builtins: bool = True) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(TextcmdHookSpec)
        if builtins:
            self.register_plugin(BuiltinLanguagesPlugin(), name=BUILTIN_PLUGIN_NAME)

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        """Names of all registered plugins, in registration order."""
        return [name for name, _plugin in self._pm.list_name_plugin()]

    # ------------------------------------------------------------------
    # Catalog assembly
    # ------------------------------------------------------------------

    def build_catalog(self, extra: Iterable[LanguageSyntax] = ()) -> SyntaxCatalog:
        """Collect syntax from every plugin into a :class:`SyntaxCatalog`.

        Plugins are consulted in registration order, so a later plugin
        overrides an earlier one for the same language id; *extra*
        (user configuration) overrides them all. A failing plugin is
        skipped with a warning.
        """
        catalog = SyntaxCatalog()
        for name, plugin in self._pm.list_name_plugin():
            for syntax in self._collect_plugin_syntax(plugin, name):
                catalog.register(syntax)
        for syntax in extra:
            catalog.register(syntax)
        return catalog

    @staticmethod
    def _collect_plugin_syntax(plugin: object, plugin_name: str) -> list[LanguageSyntax]:
        hook = getattr(plugin, "register_language_syntax", None)
        if hook is None:
            return []

        try:
            returned = hook()
        except Exception:
            logger.warning(
                "Failed to collect language syntax from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return []

        if returned is None:
            return []
        if not isinstance(returned, (list, tuple)):
            logger.warning("Plugin %s returned non-list language syntax", plugin_name)
            return []

        collected: list[LanguageSyntax] = []
        for item in returned:
            try:
                collected.append(_coerce_syntax(item))
            except (TypeError, ValidationError):
                logger.warning(
                    "Skipping language syntax %r from plugin %s",
                    item,
                    plugin_name,
                    exc_info=True,
                )
        return collected

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python plugins.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module, and every class in it carrying hookimpl-decorated methods
        is instantiated and registered. Errors are logged as warnings and
        never raised.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"textcmd_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name or not self._has_hook_impls(obj):
                    continue
                try:
                    self.register_plugin(obj(), name=f"{module_name}.{obj.__name__}")
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _normalize_plugin_instances(self) -> None:
        """Replace entry-point plugin classes with instances.

        Hook calls against a bare class leave ``self`` unbound.
        """
        for plugin_name, plugin in list(self._pm.list_name_plugin()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* has any method decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("textcmd")`` sets a ``textcmd_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False


def _coerce_syntax(item: Any) -> LanguageSyntax:
    if isinstance(item, LanguageSyntax):
        return item
    if isinstance(item, dict):
        return LanguageSyntax.model_validate(item)
    msg = f"Expected LanguageSyntax or dict, got {type(item).__name__}"
    raise TypeError(msg)
