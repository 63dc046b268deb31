# server/utils/file_util.py
"""
File and JSON helpers handed to plugins by the host.
"""
import json
import os
from typing import Any


class FileUtil:
    def file_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def read_file(self, path: str) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def write_file(self, path: str, text: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)


class JsonUtil:
    def deserialize(self, text: str) -> Any:
        """Parses JSON text. Raises ValueError (json.JSONDecodeError) on bad input."""
        return json.loads(text)

    def serialize(self, data: Any, indent: int = 2) -> str:
        return json.dumps(data, indent=indent, ensure_ascii=False)
