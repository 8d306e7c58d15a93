"""
Tests for the launcher window, rendered offscreen.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from game_launcher.core.models import (PipelineState, ProgressEvent,
                                       UpdateOutcome, UpdatePhase)
from game_launcher.gui.main_window import GAME_NOT_FOUND_MESSAGE, MainWindow

pytestmark = pytest.mark.gui


@pytest.fixture(scope="module")
def qt_app():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def window(qt_app, sample_config):
    main_window = MainWindow(sample_config)
    yield main_window
    main_window.deleteLater()


class TestMainWindow:
    """Test MainWindow status and progress handling."""

    def test_reports_missing_game(self, window):
        assert window.status_label.text() == GAME_NOT_FOUND_MESSAGE
        assert window.progress_bar.isHidden()

    def test_play_without_executable(self, window):
        window.start_game()
        assert window.status_label.text() == UpdateOutcome.EXECUTABLE_MISSING.status_message

    def test_download_progress(self, window):
        window._on_progress(ProgressEvent(UpdatePhase.DOWNLOADING, 42))

        assert window.progress_bar.value() == 42
        assert window.status_label.text() == "Downloading... 42%"

    def test_indeterminate_progress_uses_marquee(self, window):
        window._on_progress(ProgressEvent(UpdatePhase.EXTRACTING))
        assert window.progress_bar.maximum() == 0

    def test_state_messages(self, window):
        window._on_state_changed(PipelineState.EXTRACTING)
        assert window.status_label.text() == "Extracting files..."

    def test_finished_resets_ui(self, window):
        window.progress_bar.setVisible(True)
        window.update_button.setEnabled(False)

        window._on_pipeline_finished(UpdateOutcome.NETWORK_ERROR)

        assert window.progress_bar.isHidden()
        assert window.update_button.isEnabled()
        assert window.status_label.text() == UpdateOutcome.NETWORK_ERROR.status_message
