from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Optional

class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    UNREADABLE = "unreadable"
    ACCESS_DENIED = "access_denied"
    ERROR = "error"

@dataclass
class TreeNode:
    name: str
    path: str
    kind: NodeKind
    size: int = 0
    extension: Optional[str] = None       # only for files
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_marker(self) -> bool:
        # access-denied files keep a name and extension, they are not markers
        return self.kind in (NodeKind.UNREADABLE, NodeKind.ERROR) or (
            self.kind is NodeKind.ACCESS_DENIED and self.extension is None
        )

    @property
    def label(self) -> str:
        if self.kind is NodeKind.UNREADABLE:
            return f"Not readable: {self.name}"
        if self.kind is NodeKind.ERROR:
            return f"Error accessing {self.name}"
        if self.kind is NodeKind.ACCESS_DENIED and self.extension is None:
            return f"Access denied: {self.name}"
        return self.name

@dataclass
class TreeStats:
    total_size: int = 0
    folder_count: int = 0
    file_count: int = 0

@dataclass
class ScanResult:
    root: TreeNode
    stats: TreeStats
    ext_stats: Dict[str, int]          # ext -> count
    unknown_files: List[str]           # absolute paths, traversal order
    root_path: str
    processed: int
    elapsed_sec: float

@dataclass
class GenerationResult:
    stats: TreeStats
    output_path: str
    elapsed_sec: float
