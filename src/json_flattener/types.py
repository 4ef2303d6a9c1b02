"""Core type definitions for the JSON Flattener."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


# Raw document text as handed to a decoder
DocumentInput = Union[bytes, str]

# Sorted (key, scalar) pairs produced by the orderer
OrderedPairs = List[Tuple[str, Any]]


class DataType(Enum):
    """Tag of a decoded document value."""
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


class DocumentFormat(Enum):
    """Enumeration of supported document formats."""
    JSON = "json"
    YAML = "yaml"


class ErrorType(Enum):
    """Enumeration of error types."""
    INPUT = "input"
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    ENCODING = "encoding"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    error_type: ErrorType
    message: str
    suggested_action: str


@dataclass
class StructureStatistics:
    """Shape of a decoded document."""
    max_depth: int
    mapping_count: int
    sequence_count: int
    scalar_count: int
    total_keys: int
    total_items: int


class ProcessingError(Exception):
    """Base exception for conversion errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class InvalidInputError(ProcessingError):
    """Input reference is absent or a parameter is unusable."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.INPUT, context)


class DecodeError(ProcessingError):
    """Source document is malformed or does not have a mapping root."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.SYNTAX,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_type, context)


class EncodeError(ProcessingError):
    """Flattened mapping could not be serialized."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.ENCODING, context)


# Abstract base classes for interfaces

class DecoderInterface(ABC):
    """Abstract interface for document decoders."""

    format: DocumentFormat

    @abstractmethod
    def decode(self, data: DocumentInput) -> Dict[str, Any]:
        """Decode a document into a root mapping."""
        pass


class EncoderInterface(ABC):
    """Abstract interface for flat mapping encoders."""

    format: DocumentFormat

    @abstractmethod
    def encode(self, pairs: OrderedPairs) -> bytes:
        """Encode ordered pairs, preserving their order."""
        pass


class DocumentFlattenerInterface(ABC):
    """Abstract interface for the document flattener."""

    @abstractmethod
    def convert_json(self, input_data: Optional[DocumentInput], delimiter: str) -> bytes:
        """Flatten a JSON document into sorted JSON."""
        pass

    @abstractmethod
    def convert_yaml(self, input_data: Optional[DocumentInput], delimiter: str) -> bytes:
        """Flatten a YAML document into sorted YAML."""
        pass
