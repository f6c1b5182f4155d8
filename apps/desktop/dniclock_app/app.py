"""Desktop clock window: presents composed frames and polls for time changes."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import QTimer
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QApplication, QLabel

from dniclock_core import AppConfig, ClockFace, load_config, local_now
from dniclock_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from dniclock_renderer import GridBuffer, grid_to_rgb32_bytes

POLL_MS = 100


def frame_to_qimage(frame: GridBuffer) -> QImage:
    data = grid_to_rgb32_bytes(frame)
    # QImage does not own ``data``; copy so the frame bytes can be released.
    return QImage(data, frame.width, frame.height, frame.width * 4, QImage.Format.Format_RGB32).copy()


class ClockWindow(QLabel):
    """Fixed-size window showing the latest frame; repaints only when the time changes."""

    def __init__(self, face: ClockFace, title: str) -> None:
        super().__init__()
        self.face = face
        self.setWindowTitle(title)
        self.setFixedSize(face.layout.width, face.layout.height)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(POLL_MS)
        self._tick()

    def _tick(self) -> None:
        frame = self.face.poll(local_now())
        if frame is not None:
            self.present(frame)

    def present(self, frame: GridBuffer) -> None:
        self.setPixmap(QPixmap.fromImage(frame_to_qimage(frame)))

    def shutdown(self) -> None:
        self._timer.stop()


def run_gui(config: Path | None = None) -> int:
    cfg: AppConfig = load_config(config)
    configure_logging(keep_files=cfg.diagnostics.keep_log_files)
    install_crash_hooks()
    logger = get_logger()

    app = QApplication(sys.argv)
    app.setApplicationName("D'ni Clock")

    face = ClockFace.from_config(cfg)
    window = ClockWindow(face, cfg.window.title)
    window.show()

    exit_code = app.exec()
    window.shutdown()
    logger.info("app shutdown", extra={"event": "shutdown", "exit_code": int(exit_code)})
    return int(exit_code)
