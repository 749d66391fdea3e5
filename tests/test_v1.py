"""
Тесты декодера Swagger 1.x
"""

from swagger_decoder import decode


class TestV1Decoder:
    """Тесты разбора apis/operations/models"""

    def test_summary_fields(self, petstore_v1):
        """Тест полей спецификации"""
        summary = decode(petstore_v1)

        assert summary.version == "1.0.0"
        assert summary.domain == "http://petstore.example.com/api"
        assert summary.base_url == "http://petstore.example.com/api"
        assert summary.is_secure is False

    def test_default_base_path(self):
        """Тест адреса по умолчанию без basePath"""
        summary = decode({"swaggerVersion": "1.2", "apis": []})

        assert summary.base_url == "http://localhost"
        assert summary.domain == "http://localhost"
        assert summary.services == []

    def test_services_and_methods(self, petstore_v1):
        """Тест сервисов по тегам и имен методов из nickname"""
        summary = decode(petstore_v1)

        assert [s.name for s in summary.services] == ["Pets", "API"]
        assert [m.method_name for m in summary.services[0].methods] == [
            "getPetById",
            "updatePetWithForm",
        ]
        assert summary.services[1].methods[0].method_name == "placeOrder"

    def test_json_preferred_accepts(self, petstore_v1):
        """Тест выбора application/json из produces спецификации"""
        get = decode(petstore_v1).services[0].methods[0]

        assert get.accepts == ["application/json"]
        assert get.content_types == ["application/json"]
        assert [(h.name, h.value) for h in get.headers] == [
            ("Accept", "'application/json'"),
            ("Content-Type", "'application/json'"),
        ]

    def test_operation_produces_kept(self, petstore_v1):
        """Тест produces операции без сужения"""
        order = decode(petstore_v1).services[1].methods[0]

        assert order.accepts == ["application/xml"]

    def test_parameters(self, petstore_v1):
        """Тест классификации параметров по paramType"""
        get, update = decode(petstore_v1).services[0].methods

        pet_id, request_id = get.parameters
        assert pet_id.is_path_parameter is True
        assert pet_id.location == "path"
        assert request_id.is_header_parameter is True
        assert request_id.camel_case_name == "xRequestId"
        assert get.has_optional_parameter is True

        status = update.parameters[1]
        assert status.is_form_parameter is True
        assert status.location == "formData"
        assert status.is_singleton is True
        assert status.singleton == "sold"
        assert update.content_types == ["application/x-www-form-urlencoded"]

    def test_body_and_pattern(self, petstore_v1):
        """Тест body параметра и x-name-pattern"""
        order = decode(petstore_v1).services[1].methods[0]

        assert order.body_param.name == "body"
        assert order.query_params[0].camel_case_name == "filterBy"
        assert order.query_params[0].is_pattern_type is True
        assert order.query_params[0].pattern == "filter_*"
        assert order.required_params == [order.body_param]
        assert order.optional_params == order.query_params

    def test_missing_nickname(self):
        """Тест синтеза имени метода без nickname"""
        spec = {
            "swaggerVersion": "1.2",
            "apis": [{"path": "/stores/{id}", "operations": [{"method": "get"}]}],
        }
        method = decode(spec).services[0].methods[0]

        assert method.method_name == "getStoresById"
        assert method.is_get is True

    def test_models(self, petstore_v1):
        """Тест моделей с типами свойств"""
        (order,) = decode(petstore_v1).models

        assert order.name == "Order"
        assert order.model_name == "Order"
        assert [(p.name, p.camel_case_name, p.type) for p in order.properties] == [
            ("id", "id", "Integer"),
            ("ship_date", "shipDate", "Datetime"),
            ("status", "status", "String"),
        ]
        assert order.properties[2].get_extra("enum") == ["placed", "delivered"]
