# -*- coding: utf-8 -*-
"""
Event Form Wizard Package.

This package contains:
- StepPage: Qt rendering of one wizard step
- EventFormWizard: Main wizard window
"""

from .step_page import StepPage, ImagePicker
from .event_form_wizard import EventFormWizard

__all__ = [
    'StepPage',
    'ImagePicker',
    'EventFormWizard'
]
