from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Tuple
from .models import NodeKind, TreeNode, TreeStats, ScanResult
from .utils import format_entry_size, format_total_size, format_count

ACCESS_DENIED_SIZE = "[Access Denied]"

@dataclass
class HeaderStats:
    root_path: str
    total_size: str
    folders: str
    files: str

    def line(self) -> str:
        return (f"Tree: {self.root_path} | {self.total_size} Total | "
                f"{self.folders} Folders | {self.files} Files")

@dataclass
class ReportModel:
    header: HeaderStats
    tree: TreeNode
    ext_table: List[Tuple[str, int]]   # sorted by extension
    unknown_files: List[str]           # traversal order
    stats: TreeStats
    generated: datetime

def build_header(root_path: str, stats: TreeStats) -> HeaderStats:
    return HeaderStats(
        root_path=root_path,
        total_size=format_total_size(stats.total_size),
        folders=format_count(stats.folder_count),
        files=format_count(stats.file_count),
    )

def size_label(node: TreeNode) -> str:
    """Size column text for one tree entry; markers have none."""
    if node.kind is NodeKind.ACCESS_DENIED and node.extension is not None:
        return ACCESS_DENIED_SIZE
    if node.is_marker:
        return ""
    return format_entry_size(node.size)

def build_report_model(root: TreeNode,
                       stats: TreeStats,
                       ext_stats: Dict[str, int],
                       unknown_files: List[str],
                       root_path: str,
                       generated: datetime) -> ReportModel:
    return ReportModel(
        header=build_header(root_path, stats),
        tree=root,
        ext_table=sorted(ext_stats.items()),
        unknown_files=list(unknown_files),
        stats=stats,
        generated=generated,
    )

def report_from_scan(result: ScanResult, generated: datetime) -> ReportModel:
    return build_report_model(result.root, result.stats, result.ext_stats,
                              result.unknown_files, result.root_path, generated)
