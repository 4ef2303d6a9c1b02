"""
JSON Flattener - flattens nested JSON and YAML documents.

Converts arbitrarily nested objects and arrays into a single-level
mapping whose keys are delimiter-joined paths, emitted in sorted order.
"""

from .document_flattener import DocumentFlattener
from .processors import Flattener, Orderer
from .types import (
    DataType,
    DocumentFormat,
    ProcessingError,
    InvalidInputError,
    DecodeError,
    EncodeError,
)

__version__ = "1.0.0"
__all__ = [
    "DocumentFlattener",
    "Flattener",
    "Orderer",
    "DataType",
    "DocumentFormat",
    "ProcessingError",
    "InvalidInputError",
    "DecodeError",
    "EncodeError",
]
