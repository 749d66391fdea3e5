"""
Исключения декодера спецификаций
"""


class SwaggerDecoderError(Exception):
    """Базовое исключение декодера"""


class DecoderNotFoundError(SwaggerDecoderError):
    """Не найден декодер, принимающий спецификацию"""

    def __init__(self, version):
        self.version = version
        super().__init__(
            f"Не найден подходящий декодер для версии swagger {version}"
        )


class UnsupportedVersionError(DecoderNotFoundError):
    """Версия спецификации не поддерживается"""


class UnresolvedReferenceError(SwaggerDecoderError):
    """Ссылка $ref на параметр не найдена в spec.parameters"""

    def __init__(self, ref: str, path: str = None):
        self.ref = ref
        self.path = path
        super().__init__(
            f"Не удалось разрешить ссылку {ref}" + (f" ({path})" if path else "")
        )


class InvalidMethodNameError(SwaggerDecoderError):
    """Из имени операции невозможно получить идентификатор"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Некорректное имя метода: {name!r}")
