"""
plugins/expanded_task_text/metadata.py
Mod metadata reported to the host.
"""
from plugins.plugin_system import ModMetadata

ETT_METADATA = ModMetadata(
    mod_guid="com.cj.ett",
    name="Expanded Task Text",
    author="Cj",
    version="2.0.2",
    server_version="~4.0",
    license="MIT",
)

LOG_SOURCE = ETT_METADATA.name
