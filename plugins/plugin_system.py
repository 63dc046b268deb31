"""
plugins/plugin_system.py
Plugin system for the server.
Provides infrastructure for discovering, loading and running plugins at startup.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
import importlib
import os
import inspect

from server.utils.logger import Logger


@dataclass
class ModMetadata:
    mod_guid: str
    name: str
    author: str
    version: str
    server_version: str  # compatible server version range, e.g. "~4.0"
    license: str = ""
    contributors: List[str] = field(default_factory=list)
    url: Optional[str] = None


@dataclass
class LoadResult:
    success: bool
    error: Optional[Exception] = None


class PluginBase:
    plugin_id = "base_plugin"
    plugin_name = "Base Plugin"
    # Plugins run in ascending priority; higher values load later.
    load_priority = 0
    metadata: Optional[ModMetadata] = None

    def on_load(self) -> LoadResult:
        return LoadResult(success=True)


class PluginManager:
    def __init__(self, database=None, locale_service=None, file_util=None, json_util=None,
                 plugin_path: Optional[str] = None):
        # Services a plugin can request by naming them in its constructor
        self.services: Dict[str, Any] = {
            "database": database,
            "locale_service": locale_service,
            "file_util": file_util,
            "json_util": json_util,
        }
        self.plugins: Dict[str, PluginBase] = {}  # Plugin ID to instance mapping
        self.plugin_path = plugin_path or os.path.dirname(os.path.abspath(__file__))

    def discover_plugins(self) -> List[str]:
        plugin_modules = []

        for dirname in sorted(os.listdir(self.plugin_path)):
            full_dir_path = os.path.join(self.plugin_path, dirname)
            init_file = os.path.join(full_dir_path, "__init__.py")

            # Check if it's a directory with an __init__.py file
            if os.path.isdir(full_dir_path) and os.path.exists(init_file):
                if dirname != "__pycache__":
                    plugin_modules.append(dirname)

        Logger.debug("PluginManager", f"Discovered plugin modules: {plugin_modules}")
        return plugin_modules

    def load_plugin(self, plugin_name: str) -> bool:
        try:
            module = importlib.import_module(f"plugins.{plugin_name}")

            # Find the plugin class
            plugin_class = None
            for name, obj in inspect.getmembers(module):
                if (inspect.isclass(obj) and
                    issubclass(obj, PluginBase) and
                    obj.__module__.startswith(module.__name__)):
                    plugin_class = obj
                    break

            if plugin_class is None:
                Logger.warning("PluginManager", f"No plugin class found in {plugin_name}")
                return False

            if plugin_class.plugin_id in self.plugins:
                Logger.warning("PluginManager", f"Plugin {plugin_class.plugin_id} is already loaded")
                return True

            # Prepare kwargs dict based on the constructor's parameters
            params = inspect.signature(plugin_class.__init__).parameters
            kwargs = {name: service for name, service in self.services.items() if name in params}

            plugin = plugin_class(**kwargs)
            self.plugins[plugin.plugin_id] = plugin

            Logger.debug("PluginManager", f"Loaded plugin: {plugin.plugin_id}")
            return True

        except Exception as e:
            Logger.error("PluginManager", f"Error loading plugin {plugin_name}: {e}")
            return False

    def load_all_plugins(self) -> None:
        for plugin_name in self.discover_plugins():
            self.load_plugin(plugin_name)

    def get_plugin(self, plugin_id: str) -> Optional[PluginBase]:
        return self.plugins.get(plugin_id)

    def get_load_order(self) -> List[PluginBase]:
        # sorted() is stable, so equal priorities keep discovery order
        return sorted(self.plugins.values(), key=lambda p: p.load_priority)

    def run_on_load(self) -> Dict[str, LoadResult]:
        """
        Calls on_load on every plugin in load order.
        Returns the result of each plugin by plugin ID.
        """
        results: Dict[str, LoadResult] = {}
        for plugin in self.get_load_order():
            name = plugin.metadata.name if plugin.metadata else plugin.plugin_name
            try:
                result = plugin.on_load()
            except Exception as e:
                result = LoadResult(success=False, error=e)

            if not result.success:
                Logger.critical("PluginManager", f"Plugin {name} failed to load: {result.error}")
            results[plugin.plugin_id] = result
        return results
