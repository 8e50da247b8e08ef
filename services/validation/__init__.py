# -*- coding: utf-8 -*-
"""Validation services package."""

from .field_rules import (
    FieldRule, RequiredText, OptionalText, PostalCode, Price, ImageFile
)

__all__ = ['FieldRule', 'RequiredText', 'OptionalText', 'PostalCode', 'Price', 'ImageFile']
