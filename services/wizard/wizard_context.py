# -*- coding: utf-8 -*-
"""
Wizard Context - Mutable state of one event wizard instance.

Owned by the StepNavigator; everything else reads it through
WizardState snapshots.
"""

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
import uuid


@dataclass(frozen=True)
class WizardState:
    """Read-only view of the wizard handed to the Presentation Shell."""
    step_index: int
    step_count: int
    direction: int
    form_values: Mapping[str, Any]
    is_submitting: bool = False
    is_completed: bool = False

    @property
    def is_first_step(self) -> bool:
        return self.step_index == 0

    @property
    def is_last_step(self) -> bool:
        return self.step_index == self.step_count - 1

    @property
    def progress(self) -> float:
        """Fraction of the way through the wizard (0.0 to 1.0)."""
        if self.step_count <= 1:
            return 1.0
        return self.step_index / (self.step_count - 1)


class EventWizardContext:
    """
    State of one event creation wizard.

    Values entered on every visited step accumulate in `form_values`.
    """

    def __init__(self, user_id: Optional[str] = None):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = "draft"  # draft, in_progress, submitting, completed
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step_index: int = 0
        self.direction: int = 0
        self.user_id: Optional[str] = user_id

        # Step completion tracking
        self.completed_steps: set = set()

        self.form_values: Dict[str, Any] = {}

    def mark_step_completed(self, step_index: int):
        """Mark a step as completed."""
        self.completed_steps.add(step_index)
        self.updated_at = datetime.now()

    @property
    def is_completed(self) -> bool:
        """The event was created; the wizard accepts no more navigation."""
        return self.status == "completed"

    def is_step_completed(self, step_index: int) -> bool:
        """Check if a step is completed."""
        return step_index in self.completed_steps

    def merge_values(self, values: Mapping[str, Any]):
        """Merge step values into the accumulated form values."""
        self.form_values.update(values)
        self.updated_at = datetime.now()

    def get_value(self, key: str, default: Any = None) -> Any:
        return self.form_values.get(key, default)

    def snapshot(self, step_count: int, is_submitting: bool = False) -> WizardState:
        return WizardState(
            step_index=self.current_step_index,
            step_count=step_count,
            direction=self.direction,
            form_values=MappingProxyType(dict(self.form_values)),
            is_submitting=is_submitting,
            is_completed=self.is_completed,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Summary of the wizard for logging and completion signals."""
        return {
            "wizard_id": self.wizard_id,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "user_id": self.user_id,
            "completed_steps": sorted(self.completed_steps),
        }
