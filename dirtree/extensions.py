from __future__ import annotations
from types import MappingProxyType

UNKNOWN_EXT = "unknown"
DEFAULT_ICON = "📄"

FILE_ICONS = MappingProxyType({
    "txt": "📄", "pdf": "📕", "doc": "📘", "docx": "📘",
    "xls": "📊", "xlsx": "📊", "csv": "📈",
    "png": "🖼️", "jpg": "🖼️", "jpeg": "🖼️", "gif": "🖼️", "bmp": "🖼️", "svg": "🖌️",
    "mp3": "🎵", "wav": "🎶", "ogg": "🎶",
    "mp4": "🎞️", "mkv": "📽️", "avi": "📽️", "mov": "🎬",
    "zip": "🗜️", "rar": "🗜️", "7z": "🗜️", "tar": "🗜️", "gz": "🗜️",
    "exe": "⚙️", "msi": "⚙️", "apk": "📱", "jar": "☕",
    "java": "📦", "class": "🔧", "cpp": "💻", "c": "💻", "h": "💻",
    "py": "🐍", "js": "🧩", "ts": "🧩",
    "html": "🌐", "htm": "🌐", "css": "🎨", "xml": "📄", "json": "🧾",
    "yml": "⚙️", "yaml": "⚙️", "ini": "⚙️", "cfg": "⚙️", "conf": "⚙️",
    "md": "📝", "log": "📜", "sql": "💾", "db": "💽",
    "bat": "📁", "sh": "🐚", "ps1": "🖥️",
    "ttf": "🔤", "otf": "🔠", "woff": "🔡", "woff2": "🔡", "eot": "🔣",
    "bak": "📦", "tmp": "❄️", "lock": "🔒",
    UNKNOWN_EXT: "❓",
})

def classify_extension(name: str) -> str:
    """Lowercased text after the last dot, or ``"unknown"`` if there is no dot.

    Taken literally: ``"archive."`` and ``"."`` give an empty token, which is
    its own category.
    """
    i = name.rfind(".")
    if i < 0:
        return UNKNOWN_EXT
    return name[i + 1:].lower()

def icon_for(ext: str) -> str:
    return FILE_ICONS.get(ext.lower(), DEFAULT_ICON)
