"""Processors that turn decoded documents into ordered flat mappings."""

from .flattener import Flattener
from .orderer import Orderer

__all__ = ["Flattener", "Orderer"]
