"""
File writers for generated metadata files
"""

import json
import os
from typing import Dict, Any


def ensure_directory_exists(dir_path: str) -> None:
    """Create a directory (and parents) if it does not exist"""
    os.makedirs(dir_path, exist_ok=True)


def write_content_to_file(file_path: str, content: str) -> None:
    """
    Write text to a file, creating its directory first

    Args:
        file_path: Destination path
        content: Text content, written as UTF-8
    """
    parent = os.path.dirname(file_path)
    if parent:
        ensure_directory_exists(parent)

    with open(file_path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)


def write_json_to_file(file_path: str, json_content: Dict[str, Any], indent: int = 2) -> None:
    """Serialize a dict as indented JSON and write it"""
    write_content_to_file(file_path, json.dumps(json_content, indent=indent, ensure_ascii=False))
