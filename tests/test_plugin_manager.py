# tests/test_plugin_manager.py
import unittest

from tests.fixtures import PROJECT_ROOT
from server.database import DatabaseService, LocaleService
from server.utils.file_util import FileUtil, JsonUtil
from plugins.plugin_system import PluginManager, PluginBase, LoadResult
from plugins.expanded_task_text import ExpandedTaskTextPlugin
from plugins.expanded_task_text.metadata import ETT_METADATA

class RecordingPlugin(PluginBase):
    plugin_id = "recording"
    plugin_name = "Recording"

    def __init__(self, order, priority=0, result=None):
        self.order = order
        self.load_priority = priority
        self.result = result or LoadResult(success=True)

    def on_load(self):
        self.order.append(self.plugin_id)
        return self.result

class RaisingPlugin(PluginBase):
    plugin_id = "raising"

    def on_load(self):
        raise RuntimeError("boom")

class TestPluginManager(unittest.TestCase):

    def setUp(self):
        self.database = DatabaseService()
        self.manager = PluginManager(
            database=self.database,
            locale_service=LocaleService(self.database, "ch"),
            file_util=FileUtil(),
            json_util=JsonUtil(),
        )

    def add(self, plugin_id, plugin):
        plugin.plugin_id = plugin_id
        self.manager.plugins[plugin_id] = plugin
        return plugin

    def test_discovers_and_injects_services(self):
        self.assertIn("expanded_task_text", self.manager.discover_plugins())
        self.assertTrue(self.manager.load_plugin("expanded_task_text"))

        plugin = self.manager.get_plugin("expanded_task_text")
        self.assertIsInstance(plugin, ExpandedTaskTextPlugin)
        self.assertIs(plugin.database, self.database)
        self.assertIs(plugin.locale_service, self.manager.services["locale_service"])

    def test_unknown_plugin_fails_to_load(self):
        self.assertFalse(self.manager.load_plugin("no_such_plugin"))

    def test_expanded_task_text_loads_last(self):
        order = []
        self.add("early", RecordingPlugin(order, priority=-5))
        self.add("expanded_task_text", ExpandedTaskTextPlugin())
        self.add("late", RecordingPlugin(order, priority=1000))

        load_order = [p.plugin_id for p in self.manager.get_load_order()]
        self.assertEqual(load_order, ["early", "late", "expanded_task_text"])

    def test_equal_priority_keeps_registration_order(self):
        order = []
        self.add("b", RecordingPlugin(order))
        self.add("a", RecordingPlugin(order))
        self.manager.run_on_load()
        self.assertEqual(order, ["b", "a"])

    def test_failures_are_reported_not_raised(self):
        order = []
        failure = LoadResult(success=False, error=ValueError("bad data"))
        self.add("failing", RecordingPlugin(order, result=failure))
        self.add("raising", RaisingPlugin())
        self.add("ok", RecordingPlugin(order, priority=1))

        results = self.manager.run_on_load()
        self.assertFalse(results["failing"].success)
        self.assertFalse(results["raising"].success)
        self.assertIsInstance(results["raising"].error, RuntimeError)
        self.assertTrue(results["ok"].success)
        self.assertEqual(order, ["failing", "ok"])

    def test_metadata(self):
        self.assertEqual(ExpandedTaskTextPlugin.metadata, ETT_METADATA)
        self.assertEqual(ETT_METADATA.mod_guid, "com.cj.ett")
        self.assertEqual(ETT_METADATA.version, "2.0.2")
        self.assertEqual(ETT_METADATA.server_version, "~4.0")
