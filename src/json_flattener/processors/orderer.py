"""Deterministic ordering of flat mappings."""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple, Union
from ..types import OrderedPairs


class Orderer:
    """
    Sorts flat mappings by key for reproducible output.
    
    Keys are compared by code point, which matches byte-wise comparison
    of their UTF-8 encodings. Comparison is neither locale-aware nor
    case-insensitive.
    """
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
    
    def order(self, flat_mapping: Union[Dict[str, Any], Iterable[Tuple[str, Any]]]) -> OrderedPairs:
        """
        Return the (key, value) pairs of flat_mapping sorted by key.
        
        Accepts a mapping or an iterable of pairs, so already ordered
        output can be ordered again. The input is not modified.
        
        Args:
            flat_mapping: Flat mapping or (key, value) pairs
            
        Returns:
            List of (key, value) pairs in ascending key order
        """
        pairs = flat_mapping.items() if isinstance(flat_mapping, dict) else flat_mapping
        ordered = sorted(pairs, key=lambda pair: pair[0])
        
        self.logger.debug(f"Ordered {len(ordered)} flat keys")
        return ordered
