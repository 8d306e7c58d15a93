from typing import Optional

from PySide6.QtWidgets import (QMainWindow, QVBoxLayout, QWidget, QLabel,
                               QProgressBar, QPushButton)
from PySide6.QtCore import Qt, Slot

from ..config import Config
from ..core.exceptions import LauncherError
from ..core.game import GameLauncher
from ..core.models import PipelineState, ProgressEvent, UpdateOutcome, UpdatePhase
from ..core.pipeline import UpdatePipeline
from ..updates.http import HttpClient
from ..utils.logging import get_logger
from .. import build_pipeline

from .workers.update_worker import UpdateWorker

READY_MESSAGE = "Ready to play!"
GAME_NOT_FOUND_MESSAGE = "Game not found!"

PHASE_MESSAGES = {
    PipelineState.CHECKING_VERSION: "Checking for updates...",
    PipelineState.DOWNLOADING: "Downloading update...",
    PipelineState.EXTRACTING: "Extracting files...",
    PipelineState.FINALIZING: "Finishing installation...",
}


class MainWindow(QMainWindow):
    """Launcher window: status line, progress bar, Play and Update buttons."""

    def __init__(self, config: Config, pipeline: Optional[UpdatePipeline] = None,
                 http_client: Optional[HttpClient] = None, parent=None):
        super().__init__(parent)
        self.config = config
        self.logger = get_logger(__name__)

        self.http_client = http_client or HttpClient(request_timeout=config.updates.request_timeout)
        self.pipeline = pipeline or build_pipeline(config, self.http_client)
        self.game = GameLauncher(config.game.resolve_install_dir(), config.game.executable)
        self.update_worker = UpdateWorker(self.pipeline, self.http_client, self)

        self._init_ui()
        self._connect_signals()
        self.check_game_files()
        self.logger.info("MainWindow initialized.")

    def _init_ui(self):
        self.setWindowTitle(self.config.ui.window_title)
        self.setFixedSize(self.config.ui.window_width, self.config.ui.window_height)

        main_widget = QWidget(self)
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)

        self.status_label = QLabel(READY_MESSAGE, self)
        layout.addWidget(self.status_label)
        layout.addStretch()

        self.play_button = QPushButton("PLAY", self)
        self.play_button.setMinimumHeight(60)
        layout.addWidget(self.play_button, alignment=Qt.AlignmentFlag.AlignHCenter)

        self.update_button = QPushButton("UPDATE", self)
        self.update_button.setMinimumHeight(60)
        layout.addWidget(self.update_button, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch()

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setVisible(False)
        layout.addWidget(self.progress_bar)

    def _connect_signals(self):
        self.play_button.clicked.connect(self.start_game)
        self.update_button.clicked.connect(self.check_for_updates)

        self.update_worker.progress_changed.connect(self._on_progress)
        self.update_worker.state_changed.connect(self._on_state_changed)
        self.update_worker.pipeline_finished.connect(self._on_pipeline_finished)

    def set_status(self, message: str):
        self.status_label.setText(message)

    def check_game_files(self):
        if not self.game.is_installed():
            self.set_status(GAME_NOT_FOUND_MESSAGE)

    def check_for_updates(self):
        if not self.update_worker.start_update():
            self.set_status(UpdateOutcome.BUSY.status_message)
            return
        self.update_button.setEnabled(False)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(0)
        self.progress_bar.setVisible(True)

    @Slot(object)
    def _on_state_changed(self, state: PipelineState):
        message = PHASE_MESSAGES.get(state)
        if message:
            self.set_status(message)

    @Slot(object)
    def _on_progress(self, event: ProgressEvent):
        if event.is_indeterminate:
            self.progress_bar.setRange(0, 0)  # marquee
            return
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(event.percent)
        if event.phase == UpdatePhase.DOWNLOADING:
            self.set_status(f"Downloading... {event.percent}%")

    @Slot(object)
    def _on_pipeline_finished(self, outcome: Optional[UpdateOutcome]):
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setVisible(False)
        self.update_button.setEnabled(True)
        outcome = outcome or self.pipeline.last_outcome or UpdateOutcome.UNEXPECTED_ERROR
        self.set_status(outcome.status_message)

    def start_game(self):
        try:
            self.game.launch()
        except LauncherError as e:
            outcome = UpdateOutcome.from_error(e)
            self.set_status(outcome.status_message)
            return
        self.set_status(UpdateOutcome.LAUNCHED.status_message)
        self.close()

    def stop_all_workers(self):
        """Wait for a running update and release the HTTP session."""
        self.logger.info("Stopping all workers...")
        self.update_worker.shutdown()

    def closeEvent(self, event):
        """Handle window close event."""
        self.logger.info("Application closeEvent triggered.")
        self.stop_all_workers()
        super().closeEvent(event)
