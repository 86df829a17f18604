import pytest

from dirtree.utils import (
    GIB,
    MIB,
    TIB,
    clamp,
    format_count,
    format_entry_size,
    format_total_size,
    pseudo_progress,
)


def test_entry_size_switches_to_gb_at_one_gib() -> None:
    assert format_entry_size(0) == "0.00 MB"
    assert format_entry_size(512 * 1024) == "0.50 MB"
    assert format_entry_size(GIB - 1) == "1024.00 MB"
    assert format_entry_size(GIB) == "1.00 GB"
    assert format_entry_size(1536 * MIB) == "1.50 GB"


def test_total_size_switches_to_tb_at_one_tib() -> None:
    assert format_total_size(0) == "0.00 GB"
    assert format_total_size(1536 * MIB) == "1.50 GB"
    assert format_total_size(1000 * GIB) == "1 000.00 GB"
    assert format_total_size(TIB) == "1.00 TB"
    assert format_total_size(3 * TIB) == "3.00 TB"
    assert format_total_size(2048 * TIB) == "2 048.00 TB"


def test_negative_sizes_are_rejected() -> None:
    with pytest.raises(ValueError):
        format_entry_size(-1)
    with pytest.raises(ValueError):
        format_total_size(-1)


def test_format_count_groups_with_spaces() -> None:
    assert format_count(0) == "0"
    assert format_count(999) == "999"
    assert format_count(75_321) == "75 321"
    assert format_count(1_234_567) == "1 234 567"


def test_pseudo_progress_cycles_below_100() -> None:
    assert pseudo_progress(0) == 0
    assert pseudo_progress(1_500) == 1
    assert pseudo_progress(99_999) == 99
    assert pseudo_progress(100_000) == 0
    assert pseudo_progress(150_000) == 50


def test_clamp() -> None:
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2
