# -*- coding: utf-8 -*-
"""
Event Form Controller
=====================
Drives the event wizard state machine from the Qt shell.

Plain navigation runs on the GUI thread; the final submission runs in a
SubmissionWorker thread with its own event loop so the window stays
responsive while the three remote calls complete.
"""

import asyncio
from typing import Any, Mapping, Optional

from PyQt5.QtCore import QThread, pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from services.submission_service import CancellationToken, SubmissionPipeline
from services.wizard import (
    EVENT_STEPS, EventWizardContext, NavigationOutcome, NavigationResult,
    StepNavigator, StepRegistry
)
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionWorker(QThread):
    """Background worker for the last-step advance (validation + submission)."""

    completed = pyqtSignal(object)  # NavigationResult
    failed = pyqtSignal(str)

    def __init__(self, navigator: StepNavigator, values: Mapping[str, Any],
                 cancel_token: CancellationToken):
        super().__init__()
        self.navigator = navigator
        self.values = dict(values)
        self.cancel_token = cancel_token

    def run(self):
        """Run the submission in background."""
        try:
            result = asyncio.run(self.navigator.advance(self.values, self.cancel_token))
        except Exception as e:
            logger.error(f"Submission worker crashed: {e}", exc_info=True)
            self.failed.emit(str(e))
            return
        self.completed.emit(result)


class EventFormController(BaseController):
    """
    Controller for the event creation wizard.

    Signals:
        state_changed(WizardState): after every navigation or submission change
        validation_failed(dict): field name -> message for the active step
        submission_finished(SubmissionResult): result of a submission attempt
    """

    state_changed = pyqtSignal(object)
    validation_failed = pyqtSignal(dict)
    submission_finished = pyqtSignal(object)

    def __init__(
        self,
        user_id: Optional[str] = None,
        pipeline: Optional[SubmissionPipeline] = None,
        steps: Optional[StepRegistry] = None,
        parent=None
    ):
        super().__init__(parent)
        self.navigator = StepNavigator(
            steps if steps is not None else EVENT_STEPS,
            pipeline or SubmissionPipeline(),
            EventWizardContext(user_id),
        )
        self.navigator.add_listener(self.state_changed.emit)
        self._worker: Optional[SubmissionWorker] = None
        self._cancel_token: Optional[CancellationToken] = None

    @property
    def steps(self) -> StepRegistry:
        return self.navigator.steps

    @property
    def state(self):
        return self.navigator.state

    @property
    def is_submitting(self) -> bool:
        return self._worker is not None

    def next_step(self, values: Mapping[str, Any]) -> OperationResult:
        """
        Handle the Next button.

        On the last step the submission starts in background and the result
        arrives through `submission_finished`.
        """
        if self.is_submitting:
            logger.warning("Next ignored: submission in progress")
            return OperationResult.fail("ignored")
        if self.navigator.context.is_completed:
            logger.warning("Next ignored: event already created")
            return OperationResult.fail("completed")

        if self.navigator.is_last_step():
            return self._start_submission(values)

        result = asyncio.run(self.navigator.advance(values))
        return self._handle_navigation(result)

    def previous_step(self, values: Optional[Mapping[str, Any]] = None) -> OperationResult:
        """Handle the Back button; unvalidated edits are kept."""
        if self.is_submitting:
            return OperationResult.fail("ignored")
        result = self.navigator.retreat(values)
        return OperationResult(success=result.moved, data=result)

    def cancel_submission(self):
        """Ask the running submission to stop at the next phase boundary."""
        if self._cancel_token is not None:
            logger.info("Cancelling submission")
            self._cancel_token.cancel()

    # =========================================================================
    # Internals
    # =========================================================================

    def _handle_navigation(self, result: NavigationResult) -> OperationResult:
        if result.outcome == NavigationOutcome.INVALID:
            messages = {name: error.message for name, error in result.errors.items()}
            self.validation_failed.emit(messages)
            return OperationResult.fail("invalid", errors=list(messages.values()), data=result)
        return OperationResult(success=result.outcome != NavigationOutcome.IGNORED, data=result)

    def _start_submission(self, values: Mapping[str, Any]) -> OperationResult:
        self._cancel_token = CancellationToken()
        self._worker = SubmissionWorker(self.navigator, values, self._cancel_token)
        self._worker.completed.connect(self._on_worker_completed)
        self._worker.failed.connect(self._on_worker_failed)
        self._begin("submit", user_id=self.navigator.context.user_id)
        self._worker.start()
        return OperationResult.ok(message="submitting")

    def _release_worker(self):
        worker = self._worker
        self._worker = None
        self._cancel_token = None
        if worker is not None:
            worker.wait()
            worker.deleteLater()

    def _on_worker_completed(self, result: NavigationResult):
        self._release_worker()

        if result.outcome == NavigationOutcome.INVALID:
            self._finish("submit", False)
            self._handle_navigation(result)
            return

        submission = result.submission
        success = submission is not None and submission.success
        error = str(submission.error) if submission is not None and not success else ""
        self._finish("submit", success, error)
        if submission is not None:
            self.submission_finished.emit(submission)
            self._publish("submitted", submission)

    def _on_worker_failed(self, message: str):
        self._release_worker()
        self._crash("submit", message)
