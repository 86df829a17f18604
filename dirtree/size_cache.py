from __future__ import annotations
import os
from typing import Dict, Optional

class SizeCache:
    """Recursive directory sizes computed during one scan, keyed by path."""

    def __init__(self):
        self._sizes: Dict[str, int] = {}

    @staticmethod
    def _key(path: str) -> str:
        return os.path.normcase(os.path.abspath(path))

    def get(self, path: str) -> Optional[int]:
        return self._sizes.get(self._key(path))

    def put(self, path: str, size: int):
        if size < 0:
            raise ValueError(f"negative size for {path}: {size}")
        self._sizes[self._key(path)] = int(size)

    def __contains__(self, path: str) -> bool:
        return self._key(path) in self._sizes

    def __len__(self) -> int:
        return len(self._sizes)

    def clear(self):
        self._sizes.clear()
