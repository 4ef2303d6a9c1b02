"""Data type detection for decoded documents."""

import logging
from typing import Any, Optional
from .types import DataType, StructureStatistics


class DataTypeDetector:
    """
    Classifies decoded document values.
    
    Every decoded value is exactly one of MAPPING, SEQUENCE or SCALAR;
    callers dispatch on the returned tag instead of inspecting types.
    """
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the data type detector.
        
        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
    
    def detect_element_type(self, element: Any) -> DataType:
        """
        Detect the type of a single element.
        
        Args:
            element: Element to analyze
            
        Returns:
            DataType enum indicating the element type
        """
        if isinstance(element, dict):
            return DataType.MAPPING
        elif isinstance(element, (list, tuple)):
            return DataType.SEQUENCE
        else:
            return DataType.SCALAR
    
    def count_leaves(self, data: Any) -> int:
        """
        Count scalar leaves (including nulls) reachable from data.
        
        Empty mappings and sequences contribute no leaves.
        """
        element_type = self.detect_element_type(data)
        
        if element_type == DataType.MAPPING:
            return sum(self.count_leaves(value) for value in data.values())
        elif element_type == DataType.SEQUENCE:
            return sum(self.count_leaves(item) for item in data)
        else:
            return 1
    
    def calculate_depth(self, data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth of data structure."""
        element_type = self.detect_element_type(data)
        
        if element_type == DataType.SCALAR:
            return current_depth
        
        children = data.values() if element_type == DataType.MAPPING else data
        max_child_depth = current_depth
        for child in children:
            max_child_depth = max(max_child_depth, self.calculate_depth(child, current_depth + 1))
        
        return max_child_depth
    
    def get_structure_statistics(self, data: Any) -> StructureStatistics:
        """
        Get detailed statistics about the data structure.
        
        Args:
            data: Decoded document
            
        Returns:
            StructureStatistics for the document
        """
        stats = StructureStatistics(
            max_depth=self.calculate_depth(data),
            mapping_count=0,
            sequence_count=0,
            scalar_count=0,
            total_keys=0,
            total_items=0
        )
        self._count_elements(data, stats)
        
        self.logger.debug(f"Structure statistics: depth={stats.max_depth}, "
                          f"mappings={stats.mapping_count}, sequences={stats.sequence_count}, "
                          f"scalars={stats.scalar_count}")
        return stats
    
    def _count_elements(self, data: Any, stats: StructureStatistics) -> None:
        """Recursively count different types of elements."""
        element_type = self.detect_element_type(data)
        
        if element_type == DataType.MAPPING:
            stats.mapping_count += 1
            stats.total_keys += len(data)
            
            for value in data.values():
                self._count_elements(value, stats)
        
        elif element_type == DataType.SEQUENCE:
            stats.sequence_count += 1
            stats.total_items += len(data)
            
            for item in data:
                self._count_elements(item, stats)
        
        else:
            stats.scalar_count += 1
