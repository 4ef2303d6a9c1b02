"""Document decoders for JSON and YAML input."""

import json
import logging
from typing import Any, Dict, Optional

import yaml
from yaml.composer import ComposerError

from .types import (
    DecoderInterface,
    DecodeError,
    DocumentFormat,
    DocumentInput
)
from .error_handler import ErrorHandler


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


_MERGE_TAG = "tag:yaml.org,2002:merge"


class _StrictSafeLoader(yaml.SafeLoader):
    """SafeLoader that rejects self-referencing anchors and repeated keys."""
    
    def __init__(self, stream):
        super().__init__(stream)
        self._open_anchors = set()
    
    def compose_node(self, parent, index):
        if self.check_event(yaml.AliasEvent):
            event = self.peek_event()
            if event.anchor in self._open_anchors:
                raise ComposerError(None, None,
                                    f"anchor {event.anchor!r} value contains itself",
                                    event.start_mark)
        return super().compose_node(parent, index)
    
    def compose_sequence_node(self, anchor):
        self._open_anchors.add(anchor)
        try:
            return super().compose_sequence_node(anchor)
        finally:
            self._open_anchors.discard(anchor)
    
    def compose_mapping_node(self, anchor):
        self._open_anchors.add(anchor)
        try:
            node = super().compose_mapping_node(anchor)
        finally:
            self._open_anchors.discard(anchor)
        
        seen = set()
        for key_node, _ in node.value:
            # << entries are expanded by the constructor
            if not isinstance(key_node, yaml.ScalarNode) or key_node.tag == _MERGE_TAG:
                continue
            key = (key_node.tag, key_node.value)
            if key in seen:
                raise ComposerError("while composing a mapping", node.start_mark,
                                    f"mapping key {key_node.value!r} already defined",
                                    key_node.start_mark)
            seen.add(key)
        return node


class JSONDecoder(DecoderInterface):
    """Decodes JSON text into a root mapping."""
    
    format = DocumentFormat.JSON
    
    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)
    
    def decode(self, data: DocumentInput) -> Dict[str, Any]:
        """
        Decode JSON text.
        
        Args:
            data: JSON document as bytes or str
            
        Returns:
            Root mapping of the document
            
        Raises:
            DecodeError: If the text is not valid JSON or the root is not an object
        """
        try:
            document = json.loads(data, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise DecodeError(
                f"could not unmarshal input: {e.msg} at line {e.lineno}, column {e.colno}",
                context={"format": self.format.value, "line": e.lineno, "column": e.colno}
            ) from e
        except ValueError as e:
            # UnicodeDecodeError and rejected constants
            raise DecodeError(
                f"could not unmarshal input: {e}",
                context={"format": self.format.value}
            ) from e
        
        return self.error_handler.ensure_mapping_root(document, self.format)


class YAMLDecoder(DecoderInterface):
    """
    Decodes YAML text into a root mapping.
    
    An empty stream or an explicit null document decodes to an empty
    mapping. Streams holding more than one document, anchors that
    contain their own alias and mappings with repeated keys are rejected.
    
    Plain scalars resolve by YAML 1.1 rules: yes/no/on/off are booleans
    and 010 is an octal integer, where YAML 1.2 parsers keep the first
    four as strings.
    """
    
    format = DocumentFormat.YAML
    
    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)
    
    def decode(self, data: DocumentInput) -> Dict[str, Any]:
        """
        Decode YAML text.
        
        Args:
            data: YAML document as bytes or str
            
        Returns:
            Root mapping of the document
            
        Raises:
            DecodeError: If the text is not valid YAML or the root is not a mapping
        """
        try:
            document = yaml.load(data, Loader=_StrictSafeLoader)
        except yaml.YAMLError as e:
            context = {"format": self.format.value}
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                context.update(line=mark.line + 1, column=mark.column + 1)
            raise DecodeError(f"could not unmarshal input: {e}", context=context) from e
        
        if document is None:
            self.logger.debug("YAML input holds no document, treating it as an empty mapping")
            return {}
        
        return self.error_handler.ensure_mapping_root(document, self.format)


class DocumentParser:
    """
    Dispatches decoding to the decoder registered for a format.
    """
    
    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the document parser.
        
        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)
        self.decoders = {
            DocumentFormat.JSON: JSONDecoder(self.error_handler, self.logger),
            DocumentFormat.YAML: YAMLDecoder(self.error_handler, self.logger),
        }
    
    def parse(self, data: DocumentInput, document_format: DocumentFormat) -> Dict[str, Any]:
        """
        Decode a document in the given format.
        
        Args:
            data: Document text
            document_format: Format of the document
            
        Returns:
            Root mapping of the document
            
        Raises:
            DecodeError: If decoding fails
        """
        document = self.decoders[document_format].decode(data)
        self.logger.debug(f"Decoded {document_format.value} document with {len(document)} root keys")
        return document
