# -*- coding: utf-8 -*-
"""
Event Form UI Components
"""

from .date_field import DateField
from .input_field import InputField

__all__ = [
    "DateField",
    "InputField",
]
