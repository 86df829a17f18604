import os
from pathlib import Path

import pytest

from dirtree.size_cache import SizeCache


def test_get_absent_returns_none(tmp_path: Path) -> None:
    cache = SizeCache()
    assert cache.get(str(tmp_path)) is None
    assert str(tmp_path) not in cache
    assert len(cache) == 0


def test_put_then_get_uses_normalized_path(tmp_path: Path) -> None:
    cache = SizeCache()
    cache.put(str(tmp_path / "sub"), 42)
    assert cache.get(str(tmp_path / "sub")) == 42
    assert cache.get(os.path.join(str(tmp_path), "other", "..", "sub")) == 42
    assert len(cache) == 1


def test_put_overwrites_and_clear_empties(tmp_path: Path) -> None:
    cache = SizeCache()
    cache.put(str(tmp_path), 1)
    cache.put(str(tmp_path), 7)
    assert cache.get(str(tmp_path)) == 7
    cache.clear()
    assert cache.get(str(tmp_path)) is None


def test_negative_size_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        SizeCache().put(str(tmp_path), -1)
