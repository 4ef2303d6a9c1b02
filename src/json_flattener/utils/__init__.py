"""Utility functions for the JSON Flattener."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
