"""Main JSON Flattener implementation."""

import logging
from contextlib import nullcontext
from typing import Any, Dict, Optional
from .types import (
    DocumentFlattenerInterface,
    DocumentFormat,
    DocumentInput,
    OrderedPairs
)
from .parser import DocumentParser
from .data_type_detector import DataTypeDetector
from .processors import Flattener, Orderer
from .io.encoders import get_encoder
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler


class DocumentFlattener(DocumentFlattenerInterface):
    """
    Main implementation of the document flattener interface.
    
    Decodes a JSON or YAML document, flattens it into delimiter-joined
    paths, sorts the result by key and encodes it again. Calls share no
    mutable state, so one instance may serve concurrent conversions.
    """
    
    def __init__(self, logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = False):
        """
        Initialize the document flattener.
        
        Args:
            logger: Optional logger instance
            enable_profiling: Record timing and memory metrics per conversion
        """
        self.logger = logger or logging.getLogger(__name__)
        
        self.error_handler = ErrorHandler(self.logger)
        self.parser = DocumentParser(self.error_handler, self.logger)
        self.detector = DataTypeDetector(self.logger)
        self.orderer = Orderer(self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None
    
    def convert_json(self, input_data: Optional[DocumentInput], delimiter: str) -> bytes:
        """
        Flatten a JSON object into a sorted, compact JSON object.
        
        Args:
            input_data: JSON document
            delimiter: Separator between path segments
            
        Returns:
            Encoded flat JSON object
            
        Raises:
            InvalidInputError: If input_data is None or the delimiter is empty
            DecodeError: If the input is not a JSON object
            EncodeError: If the flat mapping cannot be serialized
        """
        return self.convert(input_data, delimiter, DocumentFormat.JSON)
    
    def convert_yaml(self, input_data: Optional[DocumentInput], delimiter: str) -> bytes:
        """
        Flatten a YAML mapping into a sorted YAML mapping.
        
        Args:
            input_data: YAML document
            delimiter: Separator between path segments
            
        Returns:
            Encoded flat YAML mapping
            
        Raises:
            InvalidInputError: If input_data is None or the delimiter is empty
            DecodeError: If the input is not a YAML mapping
            EncodeError: If the flat mapping cannot be serialized
        """
        return self.convert(input_data, delimiter, DocumentFormat.YAML)
    
    def convert(self, input_data: Optional[DocumentInput], delimiter: str,
                input_format: DocumentFormat,
                output_format: Optional[DocumentFormat] = None) -> bytes:
        """
        Flatten a document and encode it, possibly in another format.
        
        Args:
            input_data: Document text
            delimiter: Separator between path segments
            input_format: Format of input_data
            output_format: Format of the result (defaults to input_format)
            
        Returns:
            Encoded flat mapping with keys in ascending order
        """
        output_format = output_format or input_format
        operation = f"convert_{input_format.value}_to_{output_format.value}"
        
        with self._profile(operation, input_data) as session:
            pairs = self._flatten_and_order(input_data, delimiter, input_format)
            output = get_encoder(output_format, self.logger).encode(pairs)
            
            if session is not None:
                session.record_output(len(output), len(pairs))
        
        self.logger.info(f"Flattened {input_format.value} document into {len(pairs)} keys "
                         f"({output_format.value}, {len(output)} bytes)")
        return output
    
    def flatten_document(self, input_data: Optional[DocumentInput], delimiter: str,
                         input_format: DocumentFormat = DocumentFormat.JSON) -> Dict[str, Any]:
        """
        Decode and flatten a document without encoding it.
        
        Returns:
            Flat mapping whose iteration order is ascending key order
        """
        with self._profile(f"flatten_{input_format.value}", input_data) as session:
            pairs = self._flatten_and_order(input_data, delimiter, input_format)
            
            if session is not None:
                session.record_output(0, len(pairs))
        
        return dict(pairs)
    
    def _flatten_and_order(self, input_data: Optional[DocumentInput], delimiter: str,
                           input_format: DocumentFormat) -> OrderedPairs:
        self.error_handler.check_conversion_parameters(input_data, delimiter)
        if isinstance(input_data, bytearray):
            input_data = bytes(input_data)
        
        document = self.parser.parse(input_data, input_format)
        if self.logger.isEnabledFor(logging.DEBUG):
            self.detector.get_structure_statistics(document)
        
        flattener = Flattener(delimiter, self.detector, self.logger)
        flat_mapping = flattener.flatten_value(document)
        
        return self.orderer.order(flat_mapping)
    
    def _profile(self, operation: str, input_data: Optional[DocumentInput]):
        if self.profiler is None:
            return nullcontext(None)
        input_size = len(input_data) if isinstance(input_data, (bytes, bytearray, str)) else 0
        return self.profiler.profile_operation(operation, input_size)
