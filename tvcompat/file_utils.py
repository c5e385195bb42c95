"""
File handling utilities and path operations
"""

import os
from fnmatch import fnmatchcase

# Video file extensions that get probed
VIDEO_EXTS = {'.mkv', '.mp4', '.mov', '.webm', '.avi'}


def has_supported_extension(path) -> bool:
    """Text after the last dot of the file name, a bare '.mkv' counts too"""
    name = os.path.basename(str(path))
    dot = name.rfind('.')
    if dot < 0:
        return False
    return name[dot:].lower() in VIDEO_EXTS



def display_name(path, full_path: bool = False) -> str:
    """Path as walked, or just its last component"""
    path = str(path)
    return path if full_path else os.path.basename(path)


def is_excluded(path, patterns) -> bool:
    """Shell glob match against the whole path, '*' also matches '/'"""
    path = str(path)
    return any(fnmatchcase(path, pattern) for pattern in patterns)


def list_dir(dirpath):
    """Directory entries sorted by name, raises OSError if unreadable"""
    with os.scandir(dirpath) as it:
        return sorted(it, key=lambda entry: entry.name)
