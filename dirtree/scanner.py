from __future__ import annotations
import os
import time
import errno
import logging
from typing import Callable, Optional, Dict, List
from .models import NodeKind, TreeNode, TreeStats, ScanResult
from .extensions import classify_extension, UNKNOWN_EXT
from .size_cache import SizeCache
from .errors import RootDirectoryError, RootAccessError

logger = logging.getLogger(__name__)

ProgressCb = Callable[[int], None]  # processed entries so far

# -------------------- Filesystem access --------------------
def _list_entries(dir_path: str) -> List[os.DirEntry]:
    with os.scandir(dir_path) as it:
        return list(it)

def _is_readable(path: str) -> bool:
    return os.access(path, os.R_OK)

def _file_size(path: str, follow_symlinks: bool = True) -> int:
    return int(os.stat(path, follow_symlinks=follow_symlinks).st_size)

def _resolve_error(path: str) -> Optional[OSError]:
    try:
        os.stat(path)
    except OSError as e:
        return e
    return None

# a symlink cycle ends here once the OS gives up resolving the path
PATH_LIMIT_ERRNOS = (errno.ELOOP, errno.ENAMETOOLONG)

def _is_dir(entry: os.DirEntry, follow_symlinks: bool) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False

def _is_symlink(entry: os.DirEntry) -> bool:
    try:
        return entry.is_symlink()
    except OSError:
        return False

def _display_name(path: str) -> str:
    return os.path.basename(path.rstrip("\\/")) or path

# -------------------- Sizing --------------------
def directory_size(dir_path: str, cache: SizeCache, follow_symlinks: bool = True) -> int:
    """Recursive size of ``dir_path``, served from ``cache`` when already known.

    Failing subtrees and unreadable entries contribute 0. The result is
    written to the cache before returning.
    """
    cached = cache.get(dir_path)
    if cached is not None:
        return cached

    size = 0
    try:
        entries = _list_entries(dir_path)
    except PermissionError:
        logger.debug("Access denied to directory: %s", dir_path)
        entries = []
    except OSError as e:
        logger.debug("Error listing %s: %s", dir_path, e)
        entries = []

    for entry in entries:
        if not follow_symlinks and _is_symlink(entry):
            continue
        if not _is_readable(entry.path):
            continue
        if _is_dir(entry, follow_symlinks):
            size += directory_size(entry.path, cache, follow_symlinks)
        else:
            try:
                size += _file_size(entry.path, follow_symlinks)
            except PermissionError:
                logger.debug("Access denied for size calculation: %s", entry.path)
            except OSError:
                pass

    cache.put(dir_path, size)
    return size

# -------------------- Traversal --------------------
def scan_directory(root: str,
                   progress: Optional[ProgressCb] = None,
                   follow_symlinks: bool = True,
                   cache: Optional[SizeCache] = None) -> ScanResult:
    """Walk ``root`` once, building the tree and all statistics together.

    Per-entry failures become marker nodes and never abort the walk. Only a
    missing root (``RootDirectoryError``) or a root that cannot be listed
    (``RootAccessError``) raise.
    """
    t0 = time.time()
    root_path = os.path.abspath(root)
    if not os.path.isdir(root_path):
        raise RootDirectoryError(f"Not a directory: {root_path}")
    try:
        root_entries = _list_entries(root_path)
    except OSError as e:
        raise RootAccessError(f"Cannot read root directory {root_path}: {e}") from e

    if cache is None:
        cache = SizeCache()
    stats = TreeStats()
    ext_stats: Dict[str, int] = {}
    unknown_files: List[str] = []
    processed = 0

    def tick():
        nonlocal processed
        processed += 1
        if progress:
            progress(processed)

    def scan_dir(dir_path: str, entries: List[os.DirEntry]) -> TreeNode:
        node = TreeNode(name=_display_name(dir_path), path=dir_path, kind=NodeKind.DIRECTORY)

        for entry in entries:
            tick()
            name = entry.name

            if not follow_symlinks and _is_symlink(entry):
                continue

            if not _is_readable(entry.path):
                err = _resolve_error(entry.path)
                if err is not None and err.errno in PATH_LIMIT_ERRNOS:
                    logger.warning("Error accessing %s: %s", entry.path, err)
                    node.children.append(TreeNode(name=name, path=entry.path, kind=NodeKind.ERROR))
                    continue
                logger.warning("Not readable: %s", entry.path)
                node.children.append(TreeNode(name=name, path=entry.path, kind=NodeKind.UNREADABLE))
                continue

            if _is_dir(entry, follow_symlinks):
                logger.debug("Folder: %s", entry.path)
                stats.folder_count += 1
                try:
                    sub_entries = _list_entries(entry.path)
                except PermissionError:
                    logger.warning("Access denied: %s", entry.path)
                    cache.put(entry.path, 0)
                    node.children.append(TreeNode(name=name, path=entry.path, kind=NodeKind.ACCESS_DENIED))
                    continue
                except OSError as e:
                    logger.warning("Error accessing %s: %s", entry.path, e)
                    cache.put(entry.path, 0)
                    node.children.append(TreeNode(name=name, path=entry.path, kind=NodeKind.ERROR))
                    continue
                child = scan_dir(entry.path, sub_entries)
                node.children.append(child)
                node.size += child.size
                continue

            logger.debug("File: %s", entry.path)
            stats.file_count += 1
            ext = classify_extension(name)
            if ext == UNKNOWN_EXT:
                unknown_files.append(entry.path)
            ext_stats[ext] = ext_stats.get(ext, 0) + 1

            try:
                sz = _file_size(entry.path, follow_symlinks)
            except PermissionError:
                logger.warning("Access denied for size: %s", entry.path)
                node.children.append(TreeNode(name=name, path=entry.path,
                                              kind=NodeKind.ACCESS_DENIED, extension=ext))
                continue
            except OSError as e:
                # counted above, but no node and no size
                logger.warning("Error reading size of %s: %s", entry.path, e)
                continue

            node.children.append(TreeNode(name=name, path=entry.path, kind=NodeKind.FILE,
                                          size=sz, extension=ext))
            node.size += sz
            stats.total_size += sz

        cache.put(dir_path, node.size)
        return node

    root_node = scan_dir(root_path, root_entries)
    elapsed = time.time() - t0
    logger.debug("Scanned %s entries under %s in %.2fs", processed, root_path, elapsed)
    return ScanResult(
        root=root_node,
        stats=stats,
        ext_stats=ext_stats,
        unknown_files=unknown_files,
        root_path=root_path,
        processed=processed,
        elapsed_sec=elapsed,
    )
