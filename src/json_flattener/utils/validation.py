"""Validation utilities for conversion inputs and decoded documents."""

from typing import Any
from ..types import ValidationResult, ValidationError, ErrorType


class ValidationUtils:
    """Utility class for validating conversion parameters."""
    
    @staticmethod
    def validate_input_reference(input_data: Any) -> ValidationResult:
        """
        Validate that a document was supplied.
        
        Empty-but-present input is valid here; whether it decodes to a
        document is decided by the decoder.
        
        Args:
            input_data: Raw document text (bytes or str)
            
        Returns:
            ValidationResult with validation details
        """
        errors = []
        
        if input_data is None:
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message="input cannot be nil",
                location="input"
            ))
        elif not isinstance(input_data, (bytes, bytearray, str)):
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message=f"input must be bytes or str, got {type(input_data).__name__}",
                location="input"
            ))
        
        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=[])
    
    @staticmethod
    def validate_delimiter(delimiter: Any) -> ValidationResult:
        """
        Validate a path delimiter.
        
        Args:
            delimiter: Separator placed between path segments
            
        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []
        
        if not isinstance(delimiter, str):
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message=f"delimiter must be a string, got {type(delimiter).__name__}",
                location="delimiter"
            ))
        elif not delimiter:
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message="delimiter cannot be empty",
                location="delimiter"
            ))
        elif delimiter.isdigit():
            warnings.append(f"Delimiter {delimiter!r} consists of digits and may be "
                            "confused with sequence indices")
        
        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)
    
    @staticmethod
    def validate_document_root(data: Any) -> ValidationResult:
        """
        Validate that a decoded document has a mapping root.
        
        Args:
            data: Decoded document
            
        Returns:
            ValidationResult with validation details
        """
        errors = []
        
        if not isinstance(data, dict):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Root element must be a mapping, got {type(data).__name__}",
                location="root"
            ))
        
        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=[])
