"""
Тесты командной строки
"""

import json
from unittest.mock import patch, MagicMock

import pytest

from swagger_decoder.cli import load_spec, main
from swagger_decoder.config import DecoderConfig


class TestLoadSpec:
    """Тесты загрузки спецификации"""

    def test_load_json(self, fixtures_dir):
        """Тест загрузки JSON файла"""
        spec = load_spec(str(fixtures_dir / "petstore.json"))
        assert spec["swagger"] == "2.0"

    def test_load_yaml(self, fixtures_dir):
        """Тест загрузки YAML файла"""
        spec = load_spec(str(fixtures_dir / "petstore.yaml"))
        assert spec["info"]["title"] == "Petstore YAML"

    def test_load_missing(self):
        """Тест несуществующего пути"""
        with pytest.raises(ValueError):
            load_spec("missing/swagger.json")

    def test_load_not_object(self, tmp_path):
        """Тест документа, не являющегося объектом"""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError):
            load_spec(str(path))

    @patch("swagger_decoder.cli.httpx.get")
    def test_load_url(self, mock_get):
        """Тест загрузки по URL"""
        response = MagicMock()
        response.text = '{"swagger": "2.0"}'
        mock_get.return_value = response

        spec = load_spec("https://api.example.com/swagger.json")

        assert spec == {"swagger": "2.0"}
        mock_get.assert_called_once_with(
            "https://api.example.com/swagger.json", follow_redirects=True
        )
        response.raise_for_status.assert_called_once()


class TestMain:
    """Тесты команды swagger-decoder"""

    def test_decode_to_file(self, fixtures_dir, tmp_path):
        """Тест декодирования в JSON файл"""
        output = tmp_path / "out" / "view.json"

        main(
            [
                "--spec",
                str(fixtures_dir / "petstore.json"),
                "--output",
                str(output),
                "--config",
                str(tmp_path / "swagger.toml"),
            ]
        )

        view = json.loads(output.read_text(encoding="utf-8"))
        assert view["title"] == "Petstore"
        assert [s["name"] for s in view["services"]] == ["Pets", "API"]

    def test_decode_to_stdout(self, fixtures_dir, tmp_path, capsys):
        """Тест вывода результата в stdout"""
        main(
            [
                "--spec",
                str(fixtures_dir / "petstore.yaml"),
                "--service-name",
                "Default",
                "--config",
                str(tmp_path / "swagger.toml"),
            ]
        )

        view = json.loads(capsys.readouterr().out)
        assert view["version"] == "2.1"
        assert view["baseUrl"] == "https://yaml.example.com/v2"
        assert view["serviceName"] == "Default"

    def test_config_used(self, fixtures_dir, tmp_path):
        """Тест параметров из файла конфигурации"""
        config_path = tmp_path / "swagger.toml"
        output = tmp_path / "view.json"
        DecoderConfig(
            spec=str(fixtures_dir / "petstore.json"),
            output=str(output),
            host="ignored",
        ).save_to_file(str(config_path))

        main(["--config", str(config_path)])

        view = json.loads(output.read_text(encoding="utf-8"))
        assert view["domain"] == "https://petstore.example.com"

    def test_init_config(self, tmp_path):
        """Тест создания файла конфигурации"""
        config_path = tmp_path / "swagger.toml"

        main(["--init-config", "--spec", "swagger.json", "--config", str(config_path)])

        assert DecoderConfig.from_file(str(config_path)) == DecoderConfig(
            spec="swagger.json"
        )

    def test_missing_spec(self, tmp_path):
        """Тест запуска без спецификации"""
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "swagger.toml")])

        assert exc_info.value.code == 1

    def test_unsupported_version(self, tmp_path, capsys):
        """Тест ошибки неподдерживаемой версии"""
        spec_path = tmp_path / "openapi.json"
        spec_path.write_text(json.dumps({"openapi": "3.0.0", "paths": {}}))

        with pytest.raises(SystemExit) as exc_info:
            main(["--spec", str(spec_path), "--config", str(tmp_path / "swagger.toml")])

        assert exc_info.value.code == 1
        assert "3.0.0" in capsys.readouterr().err
