"""
UpdateWorker runs the update pipeline in a separate thread.
"""
import asyncio
from typing import Optional

from PySide6.QtCore import QThread, Signal

from ...core.models import PipelineState, ProgressEvent
from ...core.pipeline import UpdatePipeline
from ...updates.http import HttpClient
from ...utils.logging import get_logger


class UpdateWorker(QThread):
    """
    Worker thread for the update pipeline.

    The asyncio loop is kept between runs so the shared HTTP session stays usable;
    ``shutdown()`` releases both.
    """
    progress_changed = Signal(object)  # ProgressEvent
    state_changed = Signal(object)  # PipelineState
    pipeline_finished = Signal(object)  # UpdateOutcome, or None when the trigger was ignored

    def __init__(self, pipeline: UpdatePipeline, http_client: HttpClient, parent=None):
        super().__init__(parent)
        self.logger = get_logger(__name__)
        self.pipeline = pipeline
        self.http_client = http_client
        self._loop: Optional[asyncio.AbstractEventLoop] = None

        # Qt queues these emissions to the GUI thread
        self.pipeline.progress.subscribe(self._forward_progress)
        self.pipeline.on_state_changed(self._forward_state)

    def _forward_progress(self, event: ProgressEvent):
        self.progress_changed.emit(event)

    def _forward_state(self, state: PipelineState):
        self.state_changed.emit(state)

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        return self._loop

    def run(self):
        """Main execution method for the QThread."""
        self.logger.info("UpdateWorker thread started.")
        outcome = None
        loop = self._get_loop()
        asyncio.set_event_loop(loop)
        try:
            outcome = loop.run_until_complete(self.pipeline.run())
        except Exception as e:
            self.logger.critical(f"UpdateWorker: Unhandled exception in run loop: {e}", exc_info=True)
        finally:
            self.pipeline_finished.emit(outcome)
            self.logger.info("UpdateWorker thread finished.")

    def start_update(self) -> bool:
        """Public method to trigger an update run. Returns False if one is already running."""
        if self.isRunning() or self.pipeline.is_busy:
            self.logger.warning("Update already in progress.")
            return False
        self.start()  # QThread.start() calls run()
        return True

    def shutdown(self):
        """Close the HTTP session and the event loop. Call after the thread has finished."""
        if self.isRunning():
            self.logger.info("UpdateWorker: waiting for running update to finish.")
            self.wait()
        if self._loop is not None and not self._loop.is_closed():
            self._loop.run_until_complete(self.http_client.close())
            self._loop.run_until_complete(self._loop.shutdown_asyncgens())
            self._loop.close()
        self._loop = None
