"""Выбор декодера по версии спецификации и постобработка результата"""

import logging
from typing import Dict, Any, Optional, Type

from ...exceptions import UnsupportedVersionError
from ..types.models import DecodeOptions, Method, SpecSummary
from ..utils import camel_case
from .base import BaseDecoder, spec_version
from .v1 import V1Decoder
from .v2 import V2Decoder

logger = logging.getLogger(__name__)

DECODERS = (V1Decoder, V2Decoder)


def select_decoder(spec: Dict[str, Any]) -> Type[BaseDecoder]:
    """Первый декодер, принимающий версию спецификации"""
    for decoder in DECODERS:
        if decoder.accept(spec):
            logger.debug(f"Selected {decoder.__name__} for version {spec_version(spec)}")
            return decoder

    version = spec_version(spec)
    if version is None and isinstance(spec, dict):
        version = spec.get("openapi")
    raise UnsupportedVersionError(version)


def decode_spec(
    spec: Dict[str, Any], options: Optional[DecodeOptions] = None
) -> SpecSummary:
    """Декодирование спецификации в промежуточное представление"""
    decoder = select_decoder(spec)(spec, options or DecodeOptions())
    return finalize(decoder.decode())


def finalize(summary: SpecSummary) -> SpecSummary:
    """Разбиение параметров методов по группам и имена сервисов в camelCase"""
    for service in summary.services:
        for method in service.methods:
            split_parameters(method)
        service.camel_case_name = camel_case(service.name)

    return summary


def split_parameters(method: Method) -> Method:
    params = method.parameters

    method.path_params = [p for p in params if p.is_path_parameter]
    method.query_params = [p for p in params if p.is_query_parameter]
    method.header_params = [p for p in params if p.is_header_parameter]
    method.form_params = [p for p in params if p.is_form_parameter]
    method.required_params = [p for p in params if p.required]
    method.optional_params = [p for p in params if not p.required]
    method.body_param = next((p for p in params if p.is_body_parameter), None)

    return method


__all__ = [
    "BaseDecoder",
    "V1Decoder",
    "V2Decoder",
    "DECODERS",
    "select_decoder",
    "decode_spec",
    "finalize",
    "split_parameters",
]
