"""Output encoding for flattened documents."""

from .encoders import JSONEncoder, YAMLEncoder, get_encoder

__all__ = ["JSONEncoder", "YAMLEncoder", "get_encoder"]
