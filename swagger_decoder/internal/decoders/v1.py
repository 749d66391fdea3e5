"""
Декодер спецификаций Swagger 1.x (apis/operations/models)
"""

import logging

from ..types.models import HeaderSpec, Method, SpecSummary
from ..utils import path_to_method_name
from .base import BaseDecoder, text

logger = logging.getLogger(__name__)

DEFAULT_BASE_PATH = "http://localhost"


class V1Decoder(BaseDecoder):
    """Декодер Swagger 1.x"""

    version_range = "1.x"
    form_location = "form"

    def decode(self) -> SpecSummary:
        spec = self.spec
        base_path = spec.get("basePath") or DEFAULT_BASE_PATH

        self.summary = SpecSummary(
            version=text(spec.get("apiVersion")),
            title=text(spec.get("title")),
            description=spec.get("description"),
            is_secure=spec.get("authorizations") is not None,
            domain=base_path,
            base_url=base_path,
            module_name=self.options.module_name,
            service_name=self.options.service_name,
            imports=self.options.imports,
        )

        apis = spec["apis"]
        logger.debug(f"Decoding Swagger 1.x document with {len(apis)} apis")
        for api in apis:
            for operation in api["operations"]:
                self._decode_operation(api["path"], operation)

        self.summary.models = self._decode_models(spec.get("models"))
        return self.summary

    def _decode_operation(self, path: str, operation: dict):
        service = self._ensure_service(operation)

        verb = operation["method"].upper()
        method_name = self._method_name(operation.get("nickname"), service)
        if not method_name:
            method_name = path_to_method_name(verb, path)
            logger.debug(f"No nickname for {verb} {path}, using {method_name}")

        method = Method(
            path=path,
            method_name=self._register_method_name(method_name, service),
            method=verb,
            is_get=verb == "GET",
            is_post=verb == "POST",
            summary=operation.get("summary"),
            is_secure=(
                self.summary.is_secure or operation.get("authorizations") is not None
            ),
        )

        self._resolve_media_types(operation, method)
        if method.content_types:
            method.headers.append(
                HeaderSpec(
                    name="Content-Type",
                    value="'" + ",".join(method.content_types) + "'",
                )
            )

        for raw in operation.get("parameters") or []:
            method.parameters.append(
                self._build_parameter(raw, raw.get("paramType"), method)
            )

        service.methods.append(method)
