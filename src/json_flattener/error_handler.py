"""Error handling implementation for the JSON Flattener."""

import logging
from typing import Any, Dict, Optional
from .types import (
    DecodeError,
    DocumentFormat,
    ErrorResponse,
    ErrorType,
    InvalidInputError,
    ProcessingError,
    ValidationResult
)
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Error handler for JSON Flattener operations.
    
    Turns validation failures into typed exceptions and maps raised
    errors to advice for the caller.
    """
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.
        
        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)
    
    def validate_input(self, input_data: Any) -> ValidationResult:
        """
        Validate the raw document reference.
        
        Args:
            input_data: Document text to validate
            
        Returns:
            ValidationResult with validation details
        """
        return ValidationUtils.validate_input_reference(input_data)
    
    def validate_delimiter(self, delimiter: Any) -> ValidationResult:
        """
        Validate a path delimiter, logging any warnings.
        
        Args:
            delimiter: Delimiter to validate
            
        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_delimiter(delimiter)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result
    
    def check_conversion_parameters(self, input_data: Any, delimiter: Any) -> None:
        """
        Raise if a conversion cannot start.
        
        Raises:
            InvalidInputError: If the input is absent or the delimiter is unusable
        """
        for result in (self.validate_input(input_data), self.validate_delimiter(delimiter)):
            if not result.is_valid:
                raise InvalidInputError(
                    "; ".join(error.message for error in result.errors),
                    context={"location": result.errors[0].location}
                )
    
    def ensure_mapping_root(self, document: Any, document_format: DocumentFormat) -> Dict[str, Any]:
        """
        Return document if its root is a mapping.
        
        Raises:
            DecodeError: If the root is a sequence or scalar
        """
        result = ValidationUtils.validate_document_root(document)
        if not result.is_valid:
            raise DecodeError(
                f"could not unmarshal input: {result.errors[0].message}",
                error_type=ErrorType.STRUCTURE,
                context={"format": document_format.value, "root_type": type(document).__name__}
            )
        return document
    
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Log a conversion error and suggest a remedy.
        
        Args:
            error: ProcessingError to handle
            
        Returns:
            ErrorResponse with the suggested action
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")
        
        if error.error_type == ErrorType.INPUT:
            action = "Provide a document and a non-empty delimiter."
        elif error.error_type == ErrorType.SYNTAX:
            location = ""
            if error.context and "line" in error.context:
                location = f" near line {error.context['line']}, column {error.context['column']}"
            action = f"Fix the document syntax{location}."
        elif error.error_type == ErrorType.STRUCTURE:
            action = "Wrap the document in a top-level object; only mapping roots can be flattened."
        elif error.error_type == ErrorType.ENCODING:
            action = "Choose an output format that can represent every value in the document."
        else:
            action = "Check logs for details."
        
        return ErrorResponse(
            error_type=error.error_type,
            message=str(error),
            suggested_action=action
        )
