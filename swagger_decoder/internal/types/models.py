from dataclasses import dataclass
from typing import Optional, Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


HTTP_METHODS = (
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "PATCH",
    "COPY",
    "HEAD",
    "OPTIONS",
    "LINK",
    "UNLINK",
    "PURGE",
    "LOCK",
    "UNLOCK",
    "PROPFIND",
)


@dataclass
class DecodeOptions:
    """Параметры декодирования, передаваемые вызывающей стороной"""

    module_name: Optional[str] = None
    service_name: Optional[str] = None
    imports: Optional[List[str]] = None
    host: Optional[str] = None
    schema: Optional[str] = None
    strict_refs: bool = False
    proxy_headers: bool = False


class IRModel(BaseModel):
    """Базовая запись промежуточного представления (camelCase при сериализации)"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, protected_namespaces=()
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class SpecNode(IRModel):
    """Запись, сохраняющая все дополнительные ключи исходного узла спецификации"""

    model_config = ConfigDict(extra="allow")

    def get_extra(self, key: str, default: Any = None) -> Any:
        return (self.model_extra or {}).get(key, default)


class Property(SpecNode):
    name: str
    camel_case_name: str = ""
    type: str = ""


class Model(SpecNode):
    name: str
    model_name: str
    version: Optional[str] = None
    properties: List[Property] = []


class Parameter(SpecNode):
    name: str = ""
    camel_case_name: str = ""
    location: Optional[str] = Field(default=None, alias="in")
    required: bool = False

    is_path_parameter: bool = False
    is_query_parameter: bool = False
    is_header_parameter: bool = False
    is_form_parameter: bool = False
    is_body_parameter: bool = False

    is_singleton: bool = False
    singleton: Any = None
    is_pattern_type: bool = False
    pattern: Optional[str] = None
    cardinality: str = "?"


class HeaderSpec(IRModel):
    name: str
    value: str


class Method(IRModel):
    path: str
    method_name: str
    method: str
    is_get: bool = Field(default=False, alias="isGET")
    is_post: bool = Field(default=False, alias="isPOST")
    summary: Optional[str] = None
    external_docs: Optional[Dict[str, Any]] = None
    is_secure: bool = False
    has_optional_parameter: bool = False

    parameters: List[Parameter] = []
    headers: List[HeaderSpec] = []
    accepts: List[str] = []
    content_types: List[str] = []

    # Заполняются на этапе постобработки
    path_params: List[Parameter] = []
    query_params: List[Parameter] = []
    header_params: List[Parameter] = []
    form_params: List[Parameter] = []
    required_params: List[Parameter] = []
    optional_params: List[Parameter] = []
    body_param: Optional[Parameter] = None


class Service(IRModel):
    name: str
    service_name: str
    camel_case_name: str = ""
    version: Optional[str] = None
    methods: List[Method] = []

    def method_names(self) -> set:
        return {method.method_name for method in self.methods}


class SpecSummary(IRModel):
    version: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    is_secure: bool = False
    domain: str = ""
    base_url: str = ""

    module_name: Optional[str] = None
    service_name: Optional[str] = None
    imports: Optional[List[str]] = None

    services: List[Service] = []
    models: List[Model] = []

    def get_service(self, name: str) -> Optional[Service]:
        for service in self.services:
            if service.name == name:
                return service
        return None
