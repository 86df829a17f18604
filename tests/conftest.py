from pathlib import Path
from typing import Callable, Dict, Union

import pytest

TreeLayout = Dict[str, Union[int, "TreeLayout"]]


def _build(base: Path, layout: TreeLayout) -> None:
    for name, content in layout.items():
        target = base / name
        if isinstance(content, dict):
            target.mkdir()
            _build(target, content)
        else:
            target.write_bytes(b"x" * content)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeLayout], Path]:
    """Create files (name -> byte count) and folders (name -> dict) under tmp_path."""

    def factory(layout: TreeLayout) -> Path:
        _build(tmp_path, layout)
        return tmp_path

    return factory
