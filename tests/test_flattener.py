"""Tests for the recursive flattener."""

import copy
import logging

import pytest
from json_flattener.processors.flattener import Flattener
from json_flattener.data_type_detector import DataTypeDetector
from json_flattener.types import InvalidInputError


class TestFlattener:
    """Tests for Flattener class."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.flattener = Flattener(".")
    
    def _flatten(self, prefix, value, delimiter="."):
        result = {}
        Flattener(delimiter).flatten(prefix, value, result)
        return result
    
    def test_primitive_string(self):
        """Test a string scalar is stored under the prefix."""
        assert self._flatten("key", "value") == {"key": "value"}
    
    def test_primitive_number(self):
        """Test a numeric scalar is stored under the prefix."""
        assert self._flatten("count", 42) == {"count": 42}
    
    def test_primitive_boolean(self):
        """Test a boolean scalar is stored under the prefix."""
        assert self._flatten("active", True) == {"active": True}
    
    def test_primitive_null(self):
        """Test null is a leaf, not an absence."""
        assert self._flatten("data", None) == {"data": None}
    
    def test_root_scalar_uses_empty_key(self):
        """Test a scalar at the root is stored under the empty string."""
        assert self._flatten("", "value") == {"": "value"}
    
    def test_map_with_empty_prefix(self):
        """Test mapping keys are used as-is at the root."""
        result = self._flatten("", {"name": "john", "age": 30})
        
        assert result == {"name": "john", "age": 30}
    
    def test_map_with_prefix(self):
        """Test mapping keys are joined to the prefix."""
        result = self._flatten("user", {"name": "john", "age": 30})
        
        assert result == {"user.name": "john", "user.age": 30}
    
    def test_nested_map(self):
        """Test nested mappings produce dotted paths."""
        result = self._flatten("", {"user": {"address": {"city": "NYC", "zip": "10001"}}})
        
        assert result == {"user.address.city": "NYC", "user.address.zip": "10001"}
    
    def test_array_with_empty_prefix(self):
        """Test sequence indices become keys at the root."""
        result = self._flatten("", ["a", "b", "c"])
        
        assert result == {"0": "a", "1": "b", "2": "c"}
    
    def test_array_with_prefix(self):
        """Test sequence indices are joined to the prefix."""
        result = self._flatten("items", ["a", "b", "c"])
        
        assert result == {"items.0": "a", "items.1": "b", "items.2": "c"}
    
    def test_array_of_objects(self):
        """Test objects inside sequences."""
        result = self._flatten("users", [{"name": "alice"}, {"name": "bob"}])
        
        assert result == {"users.0.name": "alice", "users.1.name": "bob"}
    
    def test_nested_arrays(self):
        """Test sequences inside sequences."""
        result = self._flatten("", {"grid": [[1, 2], [3]]})
        
        assert result == {"grid.0.0": 1, "grid.0.1": 2, "grid.1.0": 3}
    
    def test_tuple_is_a_sequence(self):
        """Test tuples are flattened like lists."""
        result = self._flatten("pair", ("x", "y"))
        
        assert result == {"pair.0": "x", "pair.1": "y"}
    
    def test_custom_delimiter(self):
        """Test a single-character custom delimiter."""
        result = self._flatten("user", {"name": "jane"}, delimiter="_")
        
        assert result == {"user_name": "jane"}
    
    def test_multi_character_delimiter(self):
        """Test a multi-character delimiter."""
        result = self._flatten("", {"a": {"b": [1]}}, delimiter="::")
        
        assert result == {"a::b::0": 1}
    
    def test_empty_map(self):
        """Test an empty mapping produces no entries."""
        assert self._flatten("", {}) == {}
    
    def test_empty_array(self):
        """Test an empty sequence produces no entries."""
        assert self._flatten("items", []) == {}
    
    def test_empty_containers_nested(self):
        """Test empty containers below the root vanish."""
        result = self._flatten("", {"a": {}, "b": [], "c": 1})
        
        assert result == {"c": 1}
    
    def test_single_level_unchanged(self):
        """Test depth-1 objects flatten to themselves for any delimiter."""
        for delimiter in (".", "_", "/", "--"):
            assert self._flatten("", {"name": "james"}, delimiter) == {"name": "james"}
    
    def test_empty_key_at_root(self):
        """Test an empty key at the root adds no delimiter."""
        result = self._flatten("", {"": {"a": 1}})
        
        assert result == {"a": 1}
    
    def test_non_string_keys(self):
        """Test non-string mapping keys are rendered as segments."""
        result = self._flatten("", {1: "a", False: "b", None: "c", 2.5: "d"})
        
        assert result == {"1": "a", "false": "b", "null": "c", "2.5": "d"}
    
    def test_accumulator_is_extended_in_place(self):
        """Test entries already in the accumulator are kept."""
        result = {"existing": 1}
        
        self.flattener.flatten("new", {"key": 2}, result)
        
        assert result == {"existing": 1, "new.key": 2}
    
    def test_input_is_not_mutated(self, nested_document):
        """Test flattening leaves the input tree untouched."""
        original = copy.deepcopy(nested_document)
        
        self.flattener.flatten_value(nested_document)
        
        assert nested_document == original
    
    def test_leaf_count_preserved(self, nested_document):
        """Test one entry is produced per scalar leaf."""
        result = self.flattener.flatten_value(nested_document)
        
        assert len(result) == DataTypeDetector().count_leaves(nested_document)
        assert result["settings.limits.burst"] is None
        assert result["users.0.roles.1"] == "dev"
    
    def test_input_order_does_not_affect_result(self):
        """Test mapping iteration order changes nothing in the result."""
        forward = self.flattener.flatten_value({"a": {"x": 1, "y": 2}, "b": [3]})
        backward = self.flattener.flatten_value({"b": [3], "a": {"y": 2, "x": 1}})
        
        assert forward == backward
    
    def test_delimiter_collision_last_leaf_wins(self, caplog):
        """Test a key containing the delimiter collides with a nested path."""
        with caplog.at_level(logging.WARNING):
            result = self.flattener.flatten_value({"a.b": 1, "a": {"b": 2}})
        
        assert result == {"a.b": 2}
        assert "Key collision" in caplog.text
    
    def test_empty_delimiter_rejected(self):
        """Test an empty delimiter is rejected."""
        with pytest.raises(InvalidInputError, match="delimiter cannot be empty"):
            Flattener("")
    
    def test_non_string_delimiter_rejected(self):
        """Test a non-string delimiter is rejected."""
        with pytest.raises(InvalidInputError, match="delimiter must be a string"):
            Flattener(None)
