"""
Декодер спецификаций Swagger/OpenAPI 2.x (paths/methods/definitions)
"""

import logging
from typing import Dict, Any, List, Optional

from ...exceptions import UnresolvedReferenceError
from ..types.models import HTTP_METHODS, Method, SpecSummary
from ..utils import normalize_name, path_to_method_name
from .base import BaseDecoder, text

logger = logging.getLogger(__name__)


class V2Decoder(BaseDecoder):
    """Декодер Swagger 2.x с поддержкой $ref и общих параметров пути"""

    version_range = "^2.0"
    form_location = "formData"

    def decode(self) -> SpecSummary:
        spec = self.spec
        info = spec["info"]
        version = text(info.get("version"))
        domain = self._domain()
        base_path = spec.get("basePath")

        self.summary = SpecSummary(
            version=version,
            title=text(info.get("title")),
            description=info.get("description"),
            is_secure=spec.get("securityDefinitions") is not None,
            domain=domain,
            base_url=domain + base_path.rstrip("/") if base_path else "",
            module_name=self.options.module_name,
            service_name=self.options.service_name,
            imports=self.options.imports,
        )

        paths = spec.get("paths") or {}
        logger.debug(f"Decoding Swagger 2.x document with {len(paths)} paths")
        for path, path_item in paths.items():
            global_params = self._global_parameters(path_item)
            for verb, operation in path_item.items():
                if verb.upper() not in HTTP_METHODS:
                    continue
                self._decode_operation(path, verb, operation, global_params, version)

        self.summary.models = self._decode_models(
            spec.get("definitions"), version=version, skip_extensions=True
        )
        return self.summary

    def _domain(self) -> str:
        """Схема и хост API: схема из host, затем из schemes, затем из опций"""
        host = self.spec.get("host") or self.options.host or "localhost"

        scheme, separator, rest = host.partition("://")
        if separator and scheme:
            return f"{scheme}://{rest}"

        schemes = self.spec.get("schemes")
        scheme = (schemes and schemes[0]) or self.options.schema or "http"
        return f"{scheme}://{host}"

    @staticmethod
    def _global_parameters(path_item: Dict[str, Any]) -> List[Dict[str, Any]]:
        params = []
        # При нескольких ключах без учета регистра действует последний
        for key, value in path_item.items():
            if key.lower() == "parameters":
                params = value or []
        return params

    def _decode_operation(
        self,
        path: str,
        verb: str,
        operation: Dict[str, Any],
        global_params: List[Dict[str, Any]],
        version: Optional[str],
    ):
        service = self._ensure_service(operation, version=version)
        verb = verb.upper()

        method_name = self._method_name(operation.get("operationId"), service)
        if method_name:
            method_name = normalize_name(method_name)
        else:
            method_name = path_to_method_name(verb, path)
            logger.debug(f"No operationId for {verb} {path}, using {method_name}")

        method = Method(
            path=path,
            method_name=self._register_method_name(method_name, service),
            method=verb,
            is_get=verb == "GET",
            is_post=verb == "POST",
            summary=operation.get("description") or operation.get("summary"),
            external_docs=operation.get("externalDocs"),
            is_secure=(
                self.spec.get("security") is not None
                or operation.get("security") is not None
            ),
        )

        self._resolve_media_types(operation, method)

        params = operation.get("parameters")
        params = list(params) if isinstance(params, list) else []
        # Общие параметры пути добавляются после параметров операции, без дедупликации
        params.extend(global_params)

        for raw in params:
            if raw.get("x-exclude-from-bindings") is True:
                continue
            if raw.get("x-proxy-header") and not self.options.proxy_headers:
                continue

            if isinstance(raw.get("$ref"), str):
                raw = self._resolve_reference(raw["$ref"], f"{verb} {path}")
                if raw is None:
                    continue

            method.parameters.append(self._build_parameter(raw, raw.get("in"), method))

        service.methods.append(method)

    def _resolve_reference(self, ref: str, where: str) -> Optional[Dict[str, Any]]:
        """
        Разрешение ссылки на параметр из spec.parameters.

        Поддерживаются формы "#/parameters/<name>" и "<name>". Неразрешенная
        ссылка пропускается с предупреждением, а в строгом режиме вызывает
        UnresolvedReferenceError.
        """
        segments = ref.split("/")
        name = segments[0] if len(segments) == 1 else None
        if len(segments) >= 3:
            name = segments[2]

        parameter = (self.spec.get("parameters") or {}).get(name)
        if parameter is None:
            if self.options.strict_refs:
                raise UnresolvedReferenceError(ref, where)
            logger.warning(f"Unresolved parameter reference {ref} in {where}, skipped")

        return parameter
