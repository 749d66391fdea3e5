import copy
import logging
from typing import Dict, Any, List, Optional

from ..types.models import (
    DecodeOptions,
    HeaderSpec,
    Method,
    Model,
    Parameter,
    Property,
    Service,
    SpecSummary,
)
from ..utils import camel_case, process_method_name, satisfies, unique_name

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

# Значение поля размещения параметра -> флаг классификации
PARAMETER_LOCATIONS = {
    "body": "isBodyParameter",
    "path": "isPathParameter",
    "query": "isQueryParameter",
    "header": "isHeaderParameter",
}


def text(value) -> Optional[str]:
    """Версии и заголовки в YAML могут оказаться числами"""
    return None if value is None else str(value)


def spec_version(spec) -> Optional[str]:
    """Строка версии из полей swagger (v2) или swaggerVersion (v1)"""
    if not isinstance(spec, dict):
        return None
    return spec.get("swagger") or spec.get("swaggerVersion")


class BaseDecoder:
    """Общие шаги декодирования для всех версий спецификации"""

    version_range: str = ""
    form_location: str = ""

    def __init__(self, spec: Dict[str, Any], options: DecodeOptions):
        self.spec = spec
        self.options = options
        self.summary: Optional[SpecSummary] = None
        # Сервисы текущего вызова в порядке обнаружения
        self.services: Dict[str, Service] = {}

    @classmethod
    def accept(cls, spec: Dict[str, Any]) -> bool:
        return satisfies(text(spec_version(spec)), cls.version_range)

    def decode(self) -> SpecSummary:
        raise NotImplementedError

    def _ensure_service(self, operation: Dict[str, Any], **kwargs) -> Service:
        """Поиск или создание сервиса по первому тегу операции"""
        tags = operation.get("tags")
        name = (tags and tags[0]) or self.options.service_name or "API"

        service = self.services.get(name)
        if service is None:
            service = Service(name=name, service_name=name, **kwargs)
            self.services[name] = service
            self.summary.services.append(service)

        return service

    @staticmethod
    def _method_name(raw_name: Optional[str], service: Service) -> Optional[str]:
        """Отсечение префикса "<Сервис>." у имени операции"""
        prefix = service.name + "."
        if raw_name and raw_name.startswith(prefix):
            return raw_name[len(prefix) :]
        return raw_name

    @staticmethod
    def _register_method_name(name: str, service: Service) -> str:
        name = process_method_name(name)
        unique = unique_name(name, service.method_names())
        if unique != name:
            logger.debug(
                f"Method name {name} already taken in {service.name}, using {unique}"
            )
        return unique

    def _resolve_media_types(self, operation: Dict[str, Any], method: Method):
        """Определение accepts и contentTypes: операция важнее спецификации"""
        # Пустой список на уровне операции отменяет значение спецификации
        produces = operation.get("produces")
        if produces is None and self.spec.get("produces"):
            spec_produces = self.spec["produces"]
            # По умолчанию ожидаем JSON, если спецификация его поддерживает
            produces = (
                [JSON_CONTENT_TYPE]
                if JSON_CONTENT_TYPE in spec_produces
                else list(spec_produces)
            )

        if produces is not None:
            method.accepts = list(produces)
        if produces:
            method.headers.append(
                HeaderSpec(
                    name="Accept",
                    value=", ".join(f"'{value}'" for value in produces),
                )
            )

        consumes = operation.get("consumes")
        if consumes is None:
            consumes = self.spec.get("consumes")
        if consumes is not None:
            method.content_types = list(consumes)

    def _build_parameter(
        self, raw: Dict[str, Any], location: Optional[str], method: Method
    ) -> Parameter:
        """Классификация параметра и добавление производных полей"""
        values = copy.deepcopy(raw)
        values["camelCaseName"] = camel_case(raw.get("name"))

        enum = raw.get("enum")
        if enum and len(enum) == 1:
            values["isSingleton"] = True
            values["singleton"] = enum[0]

        if location == self.form_location:
            values["isFormParameter"] = True
            values.setdefault("in", "formData")
        elif location in PARAMETER_LOCATIONS:
            values[PARAMETER_LOCATIONS[location]] = True
            values.setdefault("in", location)

        if location == "query" and raw.get("x-name-pattern"):
            values["isPatternType"] = True
            values["pattern"] = raw["x-name-pattern"]

        required = bool(raw.get("required"))
        values["required"] = required
        values["cardinality"] = "" if required else "?"
        if not required:
            method.has_optional_parameter = True

        return Parameter.model_validate(values)

    def _decode_models(
        self, definitions: Dict[str, Any], version=None, skip_extensions=False
    ) -> List[Model]:
        """Копирование определений моделей со списком свойств вместо словаря"""
        models = []
        for name, definition in (definitions or {}).items():
            if skip_extensions and name.startswith("x-"):
                continue

            values = copy.deepcopy(definition)
            values["properties"] = [
                self._build_property(prop_name, prop)
                for prop_name, prop in (definition.get("properties") or {}).items()
            ]
            values["name"] = name
            values["modelName"] = name
            values["version"] = text(version)
            models.append(Model.model_validate(values))

        return models

    @staticmethod
    def _build_property(name: str, prop: Dict[str, Any]) -> Property:
        values = copy.deepcopy(prop)
        values["name"] = prop.get("name") or name
        values["camelCaseName"] = camel_case(values["name"])
        values["type"] = (prop.get("type") or "").capitalize()
        return Property.model_validate(values)
