"""Encoders that serialize ordered flat mappings."""

import json
import logging
from typing import Optional

import yaml

from ..types import DocumentFormat, EncodeError, EncoderInterface, OrderedPairs


class JSONEncoder(EncoderInterface):
    """
    Serializes ordered pairs as a compact JSON object.
    
    Output has no insignificant whitespace, keeps non-ASCII characters
    as UTF-8 and rejects NaN and infinities.
    """
    
    format = DocumentFormat.JSON
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
    
    def encode(self, pairs: OrderedPairs) -> bytes:
        """
        Encode pairs in the given order.
        
        Raises:
            EncodeError: If a value cannot be represented in JSON
        """
        try:
            encoded = json.dumps(
                dict(pairs),
                ensure_ascii=False,
                allow_nan=False,
                separators=(",", ":")
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            # ValueError covers NaN and UnicodeEncodeError from lone surrogates
            raise EncodeError(
                f"could not marshal result: {e}",
                context={"format": self.format.value}
            ) from e
        
        return encoded


class YAMLEncoder(EncoderInterface):
    """Serializes ordered pairs as a block-style YAML mapping."""
    
    format = DocumentFormat.YAML
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
    
    def encode(self, pairs: OrderedPairs) -> bytes:
        """
        Encode pairs in the given order.
        
        Raises:
            EncodeError: If a value cannot be represented in YAML
        """
        try:
            encoded = yaml.safe_dump(
                dict(pairs),
                sort_keys=False,
                default_flow_style=False,
                allow_unicode=True
            ).encode("utf-8")
        except (yaml.YAMLError, UnicodeEncodeError) as e:
            raise EncodeError(
                f"could not marshal result: {e}",
                context={"format": self.format.value}
            ) from e
        
        return encoded


def get_encoder(document_format: DocumentFormat,
                logger: Optional[logging.Logger] = None) -> EncoderInterface:
    """Return the encoder for a document format."""
    if document_format == DocumentFormat.JSON:
        return JSONEncoder(logger)
    return YAMLEncoder(logger)
