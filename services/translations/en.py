# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",
    "dialog.confirm": "Confirm",

    # Buttons
    "button.back": "Back",
    "button.next": "Next",
    "button.submit": "Create event",
    "button.choose_image": "Choose an image",

    # Wizard
    "wizard.title": "Create an event",
    "wizard.step_progress": "Step {current} of {total}",
    "wizard.submitting": "Submitting...",

    # Steps
    "step.general.title": "General information",
    "step.general.subtitle": "Please fill in the information below",
    "step.dates.title": "Event dates",
    "step.dates.subtitle": "Choose the start and end of the event",
    "step.image.title": "Event poster",
    "step.image.subtitle": "Choose an image *",
    "step.price.title": "Event price",
    "step.price.subtitle": "Enter a price, 0 if the event is free",
    "step.details.title": "Description and link",
    "step.details.subtitle": "Provide a short description and a website link",

    # Field labels
    "field.name": "Event name *",
    "field.address": "Address *",
    "field.zipCode": "Postal code *",
    "field.city": "City *",
    "field.startingDate": "Start *",
    "field.endingDate": "End",
    "field.endingDate.placeholder": "End time (optional)",
    "field.date.placeholder": "YYYY-MM-DD",
    "field.image": "Poster",
    "field.image.none": "No file selected",
    "field.image.filter": "Images (*.png *.jpg *.jpeg)",
    "field.price": "Price *",
    "field.description": "Description *",
    "field.website": "Event website (optional)",

    # Validation
    "validation.name.required": "The event name is required",
    "validation.address.required": "The event address is required",
    "validation.zipCode.invalid": "A 5-digit postal code is required",
    "validation.city.required": "The city is required",
    "validation.startingDate.required": "A start date is required",
    "validation.image.required": "An image is required",
    "validation.image.not_file": "The image is not valid",
    "validation.image.type": "The selected file is not an image",
    "validation.price.type": "A price is required, use 0 if free",
    "validation.price.min": "The price must be positive",
    "validation.description.required": "A description is required",
    "validation.check_data": "Please check the entered data",

    # Submission
    "success.event_created": "Event created successfully!",
    "error.submission.presign": "Could not prepare the image upload.",
    "error.submission.upload": "The image upload failed.",
    "error.submission.create": "The event could not be created.",
    "error.submission.cancelled": "The submission was cancelled.",
    "error.api.connection": "Connection error. Please check your internet connection.",
    "error.api.timeout": "Connection timeout. Please try again.",
    "error.api.unknown": "An unexpected error occurred. Please try again.",
}
