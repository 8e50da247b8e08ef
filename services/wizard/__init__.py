# -*- coding: utf-8 -*-
"""
Wizard core - step registry, validation and navigation for the event wizard.

Free of any UI dependency; the Qt shell in ui/wizards/event_form drives it.
"""

from .step_registry import EVENT_STEPS, FieldKind, FieldSpec, StepDefinition, StepRegistry, build_event_steps
from .step_validator import FieldError, StepValidationResult, StepValidator
from .wizard_context import EventWizardContext, WizardState
from .step_navigator import NavigationOutcome, NavigationResult, StepNavigator

__all__ = [
    'EVENT_STEPS',
    'FieldKind',
    'FieldSpec',
    'StepDefinition',
    'StepRegistry',
    'build_event_steps',
    'FieldError',
    'StepValidationResult',
    'StepValidator',
    'EventWizardContext',
    'WizardState',
    'NavigationOutcome',
    'NavigationResult',
    'StepNavigator',
]
