# -*- coding: utf-8 -*-
"""
Event Form Wizard Application Core Module
"""

from .config import Config

__all__ = ["Config"]
