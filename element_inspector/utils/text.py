"""
Text helpers shared by the DOM samplers and the value sanitizer.
"""

from typing import Optional

SOURCE_ROOT_SEGMENTS = ("src", "app", "components", "pages")


def truncate(text: Optional[str], limit: int, marker: str = "") -> str:
    """
    Cut text down to at most `limit` characters.
    
    Args:
        text: Text to cut, None is treated as empty
        limit: Maximum number of characters kept from the text
        marker: Appended only when something was cut
        
    Returns:
        The bounded text
    """
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + marker


def split_classes(class_name: Optional[str]) -> list[str]:
    """Split a class attribute into its non-empty class names."""
    if not class_name or not isinstance(class_name, str):
        return []
    return class_name.split()


def format_source_path(file_name: str) -> str:
    """
    Shorten an absolute debug-source path to its project-relative part.

    Keeps everything from the first conventional source root
    (src, app, components, pages), else the last three segments.
    """
    parts = file_name.split("/")
    for index, part in enumerate(parts):
        if part in SOURCE_ROOT_SEGMENTS:
            return "/".join(parts[index:])
    return "/".join(parts[-3:])
