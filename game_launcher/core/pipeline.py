"""
Update pipeline: version check, download, extraction and finalization run as
one single-flight unit of work.
"""
import threading
from typing import Callable, List, Optional

from .exceptions import LauncherError
from .interfaces import PackageInstaller, VersionSource
from .models import PipelineState, ProgressEvent, UpdateOutcome, UpdatePhase
from .progress import ProgressChannel
from ..utils.logging import get_logger

_PHASE_STATES = {
    UpdatePhase.DOWNLOADING: PipelineState.DOWNLOADING,
    UpdatePhase.EXTRACTING: PipelineState.EXTRACTING,
    UpdatePhase.INSTALLED: PipelineState.FINALIZING,
}


class UpdatePipeline:
    """Coordinates the version checker and the installer."""

    def __init__(self, checker: VersionSource, installer: PackageInstaller,
                 progress: Optional[ProgressChannel] = None):
        self.checker = checker
        self.installer = installer
        self.progress = progress or ProgressChannel()
        self.logger = get_logger(__name__)

        self._state = PipelineState.IDLE
        self._state_lock = threading.Lock()
        self._state_listeners: List[Callable[[PipelineState], None]] = []

        self.last_outcome: Optional[UpdateOutcome] = None
        self.last_error: Optional[Exception] = None

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state.is_active

    @property
    def status_message(self) -> str:
        if self.last_outcome is None:
            return ""
        return self.last_outcome.status_message

    def on_state_changed(self, callback: Callable[[PipelineState], None]):
        """Register a listener called on every state transition."""
        self._state_listeners.append(callback)

    def _try_begin(self) -> bool:
        with self._state_lock:
            if self._state.is_active:
                return False
            self._state = PipelineState.CHECKING_VERSION
        self._notify_state(PipelineState.CHECKING_VERSION)
        return True

    def _set_state(self, state: PipelineState):
        with self._state_lock:
            if self._state == state:
                return
            self._state = state
        self._notify_state(state)

    def _notify_state(self, state: PipelineState):
        self.logger.debug(f"Pipeline state -> {state.value}")
        for callback in list(self._state_listeners):
            try:
                callback(state)
            except Exception as e:
                self.logger.error(f"Error in state listener: {e}", exc_info=True)

    def _on_progress(self, percent: Optional[int], phase: str):
        update_phase = UpdatePhase(phase)
        self._set_state(_PHASE_STATES[update_phase])
        self.progress.publish(ProgressEvent(phase=update_phase, percent=percent))

    async def _fetch_version_softly(self) -> Optional[str]:
        try:
            return await self.checker.fetch_remote_version()
        except LauncherError as e:
            self.logger.warning(f"Could not fetch version token, marker will not be written: {e}")
            return None

    async def run(self) -> Optional[UpdateOutcome]:
        """
        Run the whole pipeline once.

        Returns:
            The terminal outcome, or None if another run is already in flight
        """
        if not self._try_begin():
            self.logger.warning("Update already in progress, ignoring trigger.")
            return None

        outcome = UpdateOutcome.UNEXPECTED_ERROR
        self.last_error = None
        try:
            result = await self.checker.check()
            if not result.update_available:
                outcome = UpdateOutcome.UP_TO_DATE
            else:
                version_token = result.remote_version
                if version_token is None:
                    version_token = await self._fetch_version_softly()

                self._set_state(PipelineState.DOWNLOADING)
                await self.installer.download_and_install(self._on_progress, version_token=version_token)
                outcome = UpdateOutcome.UPDATED
        except LauncherError as e:
            self.logger.error(f"Update failed: {e}")
            self.last_error = e
            outcome = UpdateOutcome.from_error(e)
        except Exception as e:
            self.logger.critical(f"Unexpected error in update pipeline: {e}", exc_info=True)
            self.last_error = e
        finally:
            self.last_outcome = outcome
            self._set_state(PipelineState.FAILED if outcome.is_error else PipelineState.SUCCEEDED)

        self.logger.info(f"Update pipeline finished: {outcome.value}")
        return outcome
