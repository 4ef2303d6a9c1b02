"""Tests for validation utilities."""

from json_flattener.utils.validation import ValidationUtils
from json_flattener.types import ErrorType


class TestValidationUtils:
    """Tests for ValidationUtils class."""
    
    def test_validate_input_reference_str(self):
        """Test text input is accepted."""
        assert ValidationUtils.validate_input_reference('{"a": 1}').is_valid
    
    def test_validate_input_reference_bytearray(self):
        """Test bytearray input is accepted."""
        assert ValidationUtils.validate_input_reference(bytearray(b"{}")).is_valid
    
    def test_validate_input_reference_none(self):
        """Test None is rejected."""
        result = ValidationUtils.validate_input_reference(None)
        
        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.INPUT
        assert result.errors[0].location == "input"
    
    def test_validate_input_reference_wrong_type(self):
        """Test decoded objects are not accepted as input."""
        result = ValidationUtils.validate_input_reference({"a": 1})
        
        assert not result.is_valid
        assert "got dict" in result.errors[0].message
    
    def test_validate_delimiter_accepts_any_non_empty_string(self):
        """Test single and multi-character delimiters."""
        for delimiter in (".", "_", "::", " ", "→"):
            result = ValidationUtils.validate_delimiter(delimiter)
            
            assert result.is_valid
            assert result.warnings == []
    
    def test_validate_delimiter_empty(self):
        """Test an empty delimiter is rejected."""
        result = ValidationUtils.validate_delimiter("")
        
        assert not result.is_valid
        assert result.errors[0].location == "delimiter"
    
    def test_validate_delimiter_not_string(self):
        """Test non-string delimiters are rejected."""
        result = ValidationUtils.validate_delimiter(b".")
        
        assert not result.is_valid
        assert "got bytes" in result.errors[0].message
    
    def test_validate_delimiter_digits_warn(self):
        """Test digit delimiters are allowed with a warning."""
        result = ValidationUtils.validate_delimiter("1")
        
        assert result.is_valid
        assert len(result.warnings) == 1
    
    def test_validate_document_root_mapping(self):
        """Test mapping roots are valid."""
        assert ValidationUtils.validate_document_root({}).is_valid
    
    def test_validate_document_root_other(self):
        """Test non-mapping roots are invalid."""
        for root in ([], "text", 1, None):
            result = ValidationUtils.validate_document_root(root)
            
            assert not result.is_valid
            assert result.errors[0].type == ErrorType.STRUCTURE
