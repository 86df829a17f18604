from __future__ import annotations

import sys
import time
import logging
from typing import Optional

from PySide6.QtCore import Qt, QThread, Signal, QSize
from PySide6.QtGui import QFont, QColor, QPen, QPainter
from PySide6.QtWidgets import (
    QApplication, QDialog, QVBoxLayout, QLabel, QWidget, QFileDialog, QMessageBox
)

from . import APP_NAME
from .config import ReportConfig
from .models import GenerationResult
from .generator import generate_report
from .report import build_header
from .utils import format_count, pseudo_progress, reveal_in_file_manager

logger = logging.getLogger(__name__)

# -------------------- Style --------------------
DARK_QSS = r"""
* { font-family: "Segoe UI", sans-serif; font-size: 12px; }

QDialog { background: #404040; }
QWidget { color: #ffffff; }

QLabel#phaseLabel { font-size: 16px; font-weight: bold; }
QLabel#hintLabel { color: #b4b4b4; font-size: 14px; }

QWidget#counterBox {
    background: #404040;
    border: 1px solid #555555;
    border-radius: 6px;
}

QPushButton {
    background: #16203a;
    border: 1px solid #2a3a5a;
    border-radius: 12px;
    padding: 8px 12px;
    color: #e7efff;
}

QPushButton:hover {
    background: #1a2a4c;
    border-color: #3a5aa8;
}
"""


# -------------------- Worker thread --------------------
class GenerateThread(QThread):
    progress = Signal(int)      # processed entries
    phase = Signal(str)
    done = Signal(object)       # GenerationResult
    error = Signal(str)

    EMIT_INTERVAL = 0.10

    def __init__(self, root: str, config: ReportConfig):
        super().__init__()
        self.root = root
        self.config = config

    def run(self):
        last_emit = 0.0

        def prog(processed: int):
            nonlocal last_emit
            now = time.time()
            if now - last_emit >= self.EMIT_INTERVAL:
                last_emit = now
                self.progress.emit(processed)

        try:
            res = generate_report(self.root, self.config, progress=prog, phase=self.phase.emit)
            self.done.emit(res)
        except Exception as e:
            logger.exception("Error during processing")
            self.error.emit(str(e))


# -------------------- UI helpers --------------------
class ProgressRing(QWidget):
    """Circular percent indicator."""
    DIAMETER = 200

    def __init__(self, parent=None):
        super().__init__(parent)
        self._value = 0
        self.setFixedSize(QSize(self.DIAMETER + 20, self.DIAMETER + 20))

    def set_value(self, value: int):
        self._value = max(0, min(100, int(value)))
        self.update()

    def paintEvent(self, _ev):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)
        x = (self.width() - self.DIAMETER) // 2
        y = (self.height() - self.DIAMETER) // 2

        p.setPen(QPen(QColor(100, 100, 100), 15))
        p.drawEllipse(x, y, self.DIAMETER, self.DIAMETER)

        # Qt angles are in 1/16th of a degree, counter-clockwise from 3 o'clock
        p.setPen(QPen(QColor(76, 175, 80), 15, Qt.SolidLine, Qt.FlatCap))
        p.drawArc(x, y, self.DIAMETER, self.DIAMETER, 90 * 16, int(-self._value * 3.6 * 16))

        f = QFont(); f.setPointSize(28); f.setBold(True)
        p.setFont(f)
        p.setPen(QColor(255, 255, 255))
        p.drawText(self.rect(), Qt.AlignCenter, f"{self._value}%")


# -------------------- Dialog --------------------
class ProcessingDialog(QDialog):
    def __init__(self, root: str, config: ReportConfig, parent=None):
        super().__init__(parent)
        self.setWindowTitle(APP_NAME)
        self.setModal(True)
        self.resize(500, 570)
        self.root = root
        self.result: Optional[GenerationResult] = None
        self.failed = False

        v = QVBoxLayout(self)
        v.setContentsMargins(10, 10, 10, 10)
        v.setSpacing(10)

        self.phase_label = QLabel("Initializing...")
        self.phase_label.setObjectName("phaseLabel")
        self.phase_label.setAlignment(Qt.AlignCenter)
        v.addWidget(self.phase_label)

        self.ring = ProgressRing()
        v.addWidget(self.ring, 0, Qt.AlignHCenter)

        box = QWidget()
        box.setObjectName("counterBox")
        box.setMinimumHeight(80)
        box_l = QVBoxLayout(box)
        box_l.setContentsMargins(15, 10, 15, 10)
        self.counter_label = QLabel("Processing: 0 items total")
        self.counter_label.setAlignment(Qt.AlignCenter)
        self.counter_label.setWordWrap(True)
        box_l.addWidget(self.counter_label)
        v.addWidget(box)

        self.hint_label = QLabel("Depending on the number of files,\nthis may take some time.")
        self.hint_label.setObjectName("hintLabel")
        self.hint_label.setAlignment(Qt.AlignCenter)
        v.addWidget(self.hint_label)

        self.thread = GenerateThread(root, config)
        self.thread.progress.connect(self.on_progress)
        self.thread.phase.connect(self.phase_label.setText)
        self.thread.done.connect(self.on_done)
        self.thread.error.connect(self.on_error)

    def start(self) -> int:
        self.thread.start()
        return self.exec()

    def closeEvent(self, ev):
        # no cancellation: the run either completes or fails
        if self.thread.isRunning():
            ev.ignore()
            return
        super().closeEvent(ev)

    def on_progress(self, processed: int):
        self.counter_label.setText(f"Processing: {format_count(processed)} items")
        self.ring.set_value(pseudo_progress(processed))

    def on_done(self, result: GenerationResult):
        self.thread.wait()
        self.result = result
        header = build_header(self.root, result.stats)
        self.counter_label.setText(
            f"{self.root}\n{header.total_size} Total | {header.folders} Folders | {header.files} Files"
        )
        self.ring.set_value(100)
        self.phase_label.setText("✅ Success!")
        self.hint_label.setVisible(False)

        box = QMessageBox(self)
        box.setWindowTitle("Success")
        box.setIcon(QMessageBox.Information)
        box.setText(f"HTML file created:\n{result.output_path}")
        btn_show = box.addButton("Show in folder", QMessageBox.ActionRole)
        box.addButton(QMessageBox.Ok)
        box.exec()
        if box.clickedButton() is btn_show:
            reveal_in_file_manager(result.output_path)
        self.accept()

    def on_error(self, msg: str):
        self.thread.wait()
        self.failed = True
        QMessageBox.critical(self, f"{APP_NAME} – Error", f"Error: {msg}")
        self.reject()


# -------------------- Entry points --------------------
def _ensure_app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
        app.setApplicationName(APP_NAME)
        app.setStyleSheet(DARK_QSS)
    return app


def pick_directory() -> Optional[str]:
    _ensure_app()
    path = QFileDialog.getExistingDirectory(None, "Choose folder to index")
    if not path:
        QMessageBox.information(None, APP_NAME, "Cancelled.")
        return None
    return path


def run_with_dialog(root: str, config: ReportConfig) -> int:
    _ensure_app()
    dlg = ProcessingDialog(root, config)
    dlg.start()
    if dlg.result is not None:
        st = dlg.result.stats
        logger.info("Done: %s folders, %s files", format_count(st.folder_count), format_count(st.file_count))
        return 0
    return 1
