# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (advance/retreat, one step at a time)
- Step validation before moving forward
- Submission on the last step, one attempt in flight at most
- Progress tracking
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from services.submission_service import CancellationToken, SubmissionPipeline, SubmissionResult
from utils.logger import get_logger
from .step_registry import StepDefinition, StepRegistry
from .step_validator import FieldError, StepValidator
from .wizard_context import EventWizardContext, WizardState

logger = get_logger(__name__)


class NavigationOutcome(Enum):
    ADVANCED = "advanced"
    RETREATED = "retreated"
    INVALID = "invalid"
    SUBMITTED = "submitted"
    SUBMISSION_FAILED = "submission_failed"
    IGNORED = "ignored"
    NO_OP = "no_op"


@dataclass
class NavigationResult:
    """What a navigation request did."""
    outcome: NavigationOutcome
    state: WizardState
    errors: Dict[str, FieldError] = field(default_factory=dict)
    submission: Optional[SubmissionResult] = None

    @property
    def moved(self) -> bool:
        return self.outcome in (NavigationOutcome.ADVANCED, NavigationOutcome.RETREATED)

    @property
    def step_index(self) -> int:
        return self.state.step_index


StateListener = Callable[[WizardState], None]


class StepNavigator:
    """
    Wizard state machine.

    Responsibilities:
    - Track current step and last direction
    - Validate the active step before navigation
    - Hand the accumulated values to the submission pipeline on the last step
    - Notify listeners of every state change
    """

    def __init__(
        self,
        steps: StepRegistry,
        pipeline: SubmissionPipeline,
        context: Optional[EventWizardContext] = None,
        validator: Optional[StepValidator] = None
    ):
        """
        Initialize the navigator.

        Args:
            steps: Step registry
            pipeline: Submission pipeline used on the last step
            context: Wizard context (a new one is created if omitted)
            validator: Step validator (built from `steps` if omitted)
        """
        self.steps = steps
        self.pipeline = pipeline
        self.context = context or EventWizardContext()
        self.validator = validator or StepValidator(steps)
        self._in_flight = False
        self._listeners: List[StateListener] = []

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def current_index(self) -> int:
        return self.context.current_step_index

    @property
    def direction(self) -> int:
        return self.context.direction

    @property
    def is_submitting(self) -> bool:
        return self._in_flight

    @property
    def state(self) -> WizardState:
        return self.context.snapshot(len(self.steps), self._in_flight)

    def get_current_step(self) -> StepDefinition:
        """Get the current step."""
        return self.steps[self.current_index]

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.steps)

    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def can_go_next(self) -> bool:
        """Check if there is a step after the current one."""
        return self.current_index < len(self.steps) - 1

    def can_go_previous(self) -> bool:
        """Check if we can navigate to the previous step."""
        return self.current_index > 0 and not self._in_flight and not self.context.is_completed

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        return self.state.progress * 100.0

    def values_for_step(self, step_index: int) -> Dict[str, Any]:
        """
        Values to pre-fill a step's inputs with.

        Entered values win; an empty field declaring `default_from` takes the
        value of that earlier field (end date defaults to the start date).
        """
        values = self.context.form_values
        prefill = {}
        for spec in self.steps[step_index].render:
            value = values.get(spec.name)
            if value is None and spec.default_from is not None:
                value = values.get(spec.default_from)
            if value is not None or spec.name in values:
                prefill[spec.name] = value
        return prefill

    # =========================================================================
    # Transitions
    # =========================================================================

    async def advance(
        self,
        candidate: Mapping[str, Any],
        cancel_token: Optional[CancellationToken] = None
    ) -> NavigationResult:
        """
        Validate the active step and move forward, or submit on the last step.

        Args:
            candidate: Values entered on the active step
            cancel_token: Passed to the pipeline on the last step

        Returns:
            NavigationResult describing the outcome
        """
        if self._in_flight:
            logger.warning("Advance ignored: a submission is already in flight")
            return NavigationResult(NavigationOutcome.IGNORED, self.state)
        if self.context.is_completed:
            logger.warning("Advance ignored: the event was already created")
            return NavigationResult(NavigationOutcome.IGNORED, self.state)

        index = self.current_index
        logger.debug(f"Validating step {index}...")
        validation = self.validator.validate(index, candidate)
        if not validation.is_valid:
            logger.warning(f"Step {index} validation failed: {validation.codes}")
            return NavigationResult(NavigationOutcome.INVALID, self.state, errors=validation.errors)

        logger.debug(f"Step {index} validated successfully")
        self.context.merge_values(validation.values)
        self.context.mark_step_completed(index)

        if self.can_go_next():
            logger.info(f"Navigating: Step {index} → {index + 1}")
            self._move_to(index + 1, +1)
            return NavigationResult(NavigationOutcome.ADVANCED, self.state)

        return await self._submit(cancel_token)

    def retreat(self, pending_values: Optional[Mapping[str, Any]] = None) -> NavigationResult:
        """
        Navigate to the previous step without validation.

        Args:
            pending_values: Unvalidated edits of the step being left; kept
                so they reappear when the user comes back

        Returns:
            NavigationResult describing the outcome
        """
        if self._in_flight or self.context.is_completed:
            logger.warning("Retreat ignored: a submission is in flight or done")
            return NavigationResult(NavigationOutcome.IGNORED, self.state)

        if self.current_index == 0:
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return NavigationResult(NavigationOutcome.NO_OP, self.state)

        if pending_values:
            step = self.get_current_step()
            self.context.merge_values({
                name: value for name, value in pending_values.items() if step.owns(name)
            })

        index = self.current_index
        logger.info(f"Navigating back: Step {index} → {index - 1}")
        self._move_to(index - 1, -1)
        return NavigationResult(NavigationOutcome.RETREATED, self.state)

    # =========================================================================
    # Internals
    # =========================================================================

    async def _submit(self, cancel_token: Optional[CancellationToken]) -> NavigationResult:
        self._in_flight = True
        self.context.status = "submitting"
        self._notify()
        result = None
        try:
            result = await self.pipeline.submit(
                self.context.form_values, self.context.user_id, cancel_token
            )
        finally:
            self._in_flight = False
            if result is None:
                self.context.status = "in_progress"
                self._notify()

        if result.success:
            self.context.status = "completed"
            outcome = NavigationOutcome.SUBMITTED
            logger.info(f"Wizard completed: {self.context.to_dict()}")
        else:
            self.context.status = "in_progress"
            outcome = NavigationOutcome.SUBMISSION_FAILED
            logger.warning(f"Submission failed ({result.phase}), wizard stays on last step")

        self._notify()
        return NavigationResult(outcome, self.state, submission=result)

    def _move_to(self, new_index: int, direction: int):
        self.context.current_step_index = new_index
        self.context.direction = direction
        self.context.status = "in_progress"
        logger.debug(f"Showing step {new_index}: {self.steps[new_index].key}")
        self._notify()

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_listener(self, callback: StateListener):
        """Register a callback receiving the new WizardState after each change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        state = self.state
        for callback in list(self._listeners):
            try:
                callback(state)
            except Exception as e:
                logger.error(f"Wizard state listener error: {e}")
