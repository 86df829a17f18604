from __future__ import annotations
import os
import time
import logging
from datetime import datetime
from typing import Callable, Optional
from .config import ReportConfig, DEFAULT_CONFIG
from .models import GenerationResult
from .scanner import scan_directory, ProgressCb
from .report import report_from_scan
from .html_export import render_html, write_report
from .errors import RootDirectoryError

logger = logging.getLogger(__name__)

PhaseCb = Callable[[str], None]

PHASE_SCAN = "Generating HTML tree..."
PHASE_WRITE = "Writing report..."
PHASE_DONE = "Completed!"

def generate_report(root: str,
                    config: Optional[ReportConfig] = None,
                    progress: Optional[ProgressCb] = None,
                    phase: Optional[PhaseCb] = None) -> GenerationResult:
    """Scan ``root`` and write its HTML report into it.

    Returns the final statistics and the report path. Fatal problems raise a
    ``DirTreeError`` subclass and leave no report file behind.
    """
    config = config or DEFAULT_CONFIG
    t0 = time.time()
    root_path = os.path.abspath(root)
    if not os.path.isdir(root_path):
        raise RootDirectoryError(f"Not a directory: {root_path}")

    def set_phase(label: str):
        if phase:
            phase(label)

    logger.info("Indexing %s", root_path)
    set_phase(PHASE_SCAN)
    result = scan_directory(root_path, progress=progress, follow_symlinks=config.follow_symlinks)
    model = report_from_scan(result, datetime.now())

    set_phase(PHASE_WRITE)
    output_path = write_report(render_html(model), os.path.join(root_path, config.output_name))
    elapsed = time.time() - t0
    logger.info("HTML file created: %s", output_path)
    logger.info("%s (%.1fs)", model.header.line(), elapsed)

    set_phase(PHASE_DONE)
    return GenerationResult(stats=result.stats, output_path=output_path, elapsed_sec=elapsed)
