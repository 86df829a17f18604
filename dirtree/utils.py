from __future__ import annotations
import os
import sys
import subprocess

KIB = 1024
MIB = KIB * 1024
GIB = MIB * 1024
TIB = GIB * 1024

def _grouped(text: str) -> str:
    # space as thousands separator, dot as decimal point
    return text.replace(",", " ")

def format_entry_size(num: int) -> str:
    """Per-entry size: MB below 1 GiB, GB from there on, two decimals."""
    if num < 0:
        raise ValueError(f"negative size: {num}")
    if num >= GIB:
        return f"{num / GIB:.2f} GB"
    return f"{num / MIB:.2f} MB"

def format_total_size(num: int) -> str:
    """Header total: GB below 1 TiB, TB from there on, grouped thousands."""
    if num < 0:
        raise ValueError(f"negative size: {num}")
    if num >= TIB:
        return _grouped(f"{num / TIB:,.2f}") + " TB"
    return _grouped(f"{num / GIB:,.2f}") + " GB"

def format_count(n: int) -> str:
    return _grouped(f"{n:,d}")

def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v

def pseudo_progress(processed: int) -> int:
    """Percent-like value for a walk whose total is unknown; never reaches 100."""
    return int(clamp((processed // 1000) % 100, 0, 99))

def reveal_in_file_manager(path: str) -> bool:
    """Open the system file manager and reveal the given path.

    Works on Windows/macOS/Linux. Returns True if an attempt was made.
    """
    if not path:
        return False
    try:
        ap = os.path.abspath(path)
        if sys.platform.startswith('win'):
            if os.path.isdir(ap):
                os.startfile(ap)
            else:
                subprocess.Popen(['explorer', '/select,', ap])
            return True
        if sys.platform == 'darwin':
            subprocess.Popen(['open', '-R', ap])
            return True
        folder = ap if os.path.isdir(ap) else os.path.dirname(ap)
        subprocess.Popen(['xdg-open', folder])
        return True
    except OSError:
        return False
