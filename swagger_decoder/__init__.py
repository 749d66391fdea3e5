from .decoder import SpecDecoder, decode
from .exceptions import (
    SwaggerDecoderError,
    DecoderNotFoundError,
    UnsupportedVersionError,
    UnresolvedReferenceError,
    InvalidMethodNameError,
)
from .internal.types.models import (
    DecodeOptions,
    SpecSummary,
    Service,
    Method,
    Parameter,
    HeaderSpec,
    Model,
    Property,
)

__version__ = "0.3.0"

__all__ = [
    "SpecDecoder",
    "decode",
    "SwaggerDecoderError",
    "DecoderNotFoundError",
    "UnsupportedVersionError",
    "UnresolvedReferenceError",
    "InvalidMethodNameError",
    "DecodeOptions",
    "SpecSummary",
    "Service",
    "Method",
    "Parameter",
    "HeaderSpec",
    "Model",
    "Property",
]
