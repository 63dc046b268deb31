"""
plugins/expanded_task_text/errors.py
Errors that stop the enrichment pass.
"""


class ExpandedTaskTextError(Exception):
    """Base class for fatal Expanded Task Text errors."""
    pass


class ReferenceDataError(ExpandedTaskTextError):
    """A bundled reference file is missing or cannot be parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to load `{path}`: {reason}")
        self.path = path
        self.reason = reason


class MissingConfigError(ExpandedTaskTextError):
    """The plugin configuration was not loaded when a description was built."""

    def __init__(self):
        super().__init__("Attempted to read EttConfig.json, got null! Ensure the file exists and is valid.")
