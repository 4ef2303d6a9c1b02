"""Recursive flattener for nested document values."""

import logging
from typing import Any, Dict, Optional
from ..types import DataType, InvalidInputError
from ..data_type_detector import DataTypeDetector
from ..utils.validation import ValidationUtils


class Flattener:
    """
    Flattens nested mappings and sequences into a single-level mapping.
    
    Keys of the flat mapping are paths built from mapping keys and
    zero-based sequence indices joined by the delimiter. Every scalar
    leaf (including null) becomes exactly one entry; empty mappings and
    empty sequences produce no entries.
    
    The delimiter is not escaped. A mapping key that already contains the
    delimiter can produce the same path as a nested structure, in which
    case the leaf visited last wins.
    """
    
    def __init__(self, delimiter: str,
                 detector: Optional[DataTypeDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the flattener.
        
        Args:
            delimiter: Non-empty separator placed between path segments
            detector: Optional DataTypeDetector instance
            logger: Optional logger instance
            
        Raises:
            InvalidInputError: If the delimiter is empty or not a string
        """
        validation = ValidationUtils.validate_delimiter(delimiter)
        if not validation.is_valid:
            raise InvalidInputError(
                "; ".join(error.message for error in validation.errors),
                context={"delimiter": delimiter}
            )
        
        self.delimiter = delimiter
        self.logger = logger or logging.getLogger(__name__)
        self.detector = detector or DataTypeDetector(self.logger)
    
    def flatten(self, prefix: str, value: Any, out: Dict[str, Any]) -> None:
        """
        Flatten value under prefix into out.
        
        Args:
            prefix: Path accumulated so far ("" at the document root)
            value: Subtree to flatten; never mutated
            out: Accumulator shared by the whole traversal, mutated in place
        """
        element_type = self.detector.detect_element_type(value)
        
        if element_type == DataType.MAPPING:
            for key, child in value.items():
                self.flatten(self._child_prefix(prefix, self._format_segment(key)), child, out)
        elif element_type == DataType.SEQUENCE:
            for index, child in enumerate(value):
                self.flatten(self._child_prefix(prefix, str(index)), child, out)
        else:
            if prefix in out:
                self.logger.warning(f"Key collision on {prefix!r}: "
                                    f"replacing {out[prefix]!r} with {value!r}")
            out[prefix] = value
    
    def flatten_value(self, value: Any) -> Dict[str, Any]:
        """Flatten value from the root into a new mapping."""
        out: Dict[str, Any] = {}
        self.flatten("", value, out)
        return out
    
    def _child_prefix(self, prefix: str, segment: str) -> str:
        if prefix == "":
            return segment
        return prefix + self.delimiter + segment
    
    @staticmethod
    def _format_segment(key: Any) -> str:
        """Render a mapping key as a path segment."""
        # YAML allows non-string keys
        if isinstance(key, str):
            return key
        if isinstance(key, bool):
            return "true" if key else "false"
        if key is None:
            return "null"
        return str(key)
