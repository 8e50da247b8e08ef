# -*- coding: utf-8 -*-
"""
Step validation service for the Event Form Wizard.

Validates the candidate values of one step without UI coupling.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from services.exceptions import ValidationError
from services.translation_manager import tr
from services.validation.field_rules import FieldRule
from .step_registry import StepRegistry


@dataclass(frozen=True)
class FieldError:
    """Error reported for one field."""
    field: str
    code: str
    message: str


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    step_index: int
    values: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, FieldError] = field(default_factory=dict)

    def add_error(self, error: FieldError):
        """Add a field error."""
        self.errors[error.field] = error
        self.values.pop(error.field, None)
        self.is_valid = False

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def messages(self) -> Dict[str, str]:
        return {name: error.message for name, error in self.errors.items()}

    @property
    def codes(self) -> Dict[str, str]:
        return {name: error.code for name, error in self.errors.items()}

    def raise_if_invalid(self):
        if not self.is_valid:
            raise ValidationError(
                f"Step {self.step_index} has invalid fields: {sorted(self.errors)}",
                errors=self.messages,
                step_index=self.step_index,
            )


class StepValidator:
    """
    Validates wizard step data against the step's own field rules.

    Rules are resolved once per step at construction; fields that belong to
    other steps are ignored.
    """

    def __init__(self, steps: StepRegistry, translate: Callable[..., str] = tr):
        self.steps = steps
        self.translate = translate
        self._compiled: List[Tuple[Tuple[str, FieldRule], ...]] = [
            tuple(step.field_schema.items()) for step in steps
        ]

    def validate(self, step_index: int, candidate: Optional[Mapping[str, Any]]) -> StepValidationResult:
        """
        Validate candidate values for one step.

        Args:
            step_index: Index of the step to validate
            candidate: Field values entered by the user (may contain other fields)

        Returns:
            StepValidationResult with normalized values or field errors
        """
        if not 0 <= step_index < len(self._compiled):
            raise IndexError(f"Invalid step index: {step_index} (valid range: 0-{len(self._compiled) - 1})")

        candidate = candidate or {}
        result = StepValidationResult(is_valid=True, step_index=step_index)

        for name, rule in self._compiled[step_index]:
            value, code = rule.validate(candidate.get(name))
            if code is not None:
                result.add_error(FieldError(field=name, code=code, message=self.translate(code)))
            else:
                result.values[name] = value

        return result

    def get_step_name(self, step_index: int) -> str:
        """Get translated title for step."""
        if 0 <= step_index < len(self.steps):
            return self.translate(self.steps[step_index].title_key)
        return ""
