import pytest

from dirtree.extensions import DEFAULT_ICON, FILE_ICONS, UNKNOWN_EXT, classify_extension, icon_for


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("a.txt", "txt"),
        ("REPORT.PDF", "pdf"),
        ("archive.tar.gz", "gz"),
        ("Makefile", UNKNOWN_EXT),
        (".bashrc", "bashrc"),
    ],
)
def test_classify_extension(name: str, expected: str) -> None:
    assert classify_extension(name) == expected


def test_trailing_or_lone_dot_gives_empty_token() -> None:
    assert classify_extension("notes.") == ""
    assert classify_extension(".") == ""
    assert classify_extension("notes.") != UNKNOWN_EXT


def test_icon_lookup_falls_back_to_default() -> None:
    assert icon_for("py") == FILE_ICONS["py"]
    assert icon_for("PY") == FILE_ICONS["py"]
    assert icon_for("nosuchext") == DEFAULT_ICON
    assert icon_for("") == DEFAULT_ICON


def test_icon_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        FILE_ICONS["py"] = "x"  # type: ignore[index]
