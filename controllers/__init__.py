# -*- coding: utf-8 -*-
"""
Event Form Controllers
======================
Controller layer between the Qt widgets and the wizard services.

Usage:
    from controllers import EventFormController

    controller = EventFormController(user_id="42")
    result = controller.next_step({"name": "Concert", ...})
    if not result.success:
        print(result.errors)
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

from controllers.event_form_controller import (
    EventFormController,
    SubmissionWorker,
)

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Event form
    "EventFormController",
    "SubmissionWorker",
]
