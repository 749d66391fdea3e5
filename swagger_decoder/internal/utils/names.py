"""Утилиты для работы с именами методов, параметров и сервисов"""

import keyword
import re

from ...exceptions import InvalidMethodNameError

# Разбор слов по строке классов символов: U - заглавная, L - строчная, D - цифра
_WORD_RE = re.compile(r"U{2,}(?=UL+D*|$)|U?L+D*|U|D+")
_SEPARATOR_RE = re.compile(r"[\W_]+")
_NORMALIZE_RE = re.compile(r"[.\-{}\s]")
_INVALID_IDENTIFIER_RE = re.compile(r"\W")


def _char_class(char: str) -> str:
    if char.isdigit():
        return "D"
    # Буквы без регистра (например, иероглифы) считаются строчными
    return "U" if char.isupper() else "L"


def split_words(text: str) -> list:
    """Разбиение строки на слова по разделителям и границам регистра"""
    words = []
    for chunk in _SEPARATOR_RE.split(text or ""):
        classes = "".join(_char_class(char) for char in chunk)
        words.extend(chunk[m.start() : m.end()] for m in _WORD_RE.finditer(classes))
    return words


def camel_case(text: str) -> str:
    """
    Перевод строки в camelCase.

    Examples:
        >>> camel_case("X-Request-ID")
        'xRequestId'
        >>> camel_case("page_size")
        'pageSize'
    """
    words = split_words(text)
    if not words:
        return ""

    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def normalize_name(text: str) -> str:
    """Замена точек, дефисов, фигурных скобок и пробелов на подчеркивания"""
    return _NORMALIZE_RE.sub("_", text)


def process_method_name(name: str) -> str:
    """Приведение имени метода к валидному идентификатору Python"""
    if not name:
        raise InvalidMethodNameError(name)

    name = _INVALID_IDENTIFIER_RE.sub("_", name)
    if name[0].isdigit():
        name = "_" + name
    if keyword.iskeyword(name):
        name += "_"

    return name


def path_to_method_name(verb: str, path: str) -> str:
    """
    Синтез имени метода из HTTP метода и пути.

    Examples:
        >>> path_to_method_name("get", "/widgets/{id}")
        'getWidgetsById'
        >>> path_to_method_name("post", "/")
        'post'
    """
    verb = verb.lower()
    clean_path = path.rstrip("/")
    if not clean_path:
        return verb

    tokens = []
    for segment in clean_path.split("/")[1:]:
        if segment.startswith("{") and segment.endswith("}"):
            tokens.append("by_" + segment[1:-1])
        else:
            tokens.append(segment)

    words = split_words(" ".join(tokens))
    return verb + "".join(word.capitalize() for word in words)


def unique_name(name: str, taken) -> str:
    """Добавляет числовой суффикс, если имя уже занято"""
    if name not in taken:
        return name

    index = 2
    while f"{name}{index}" in taken:
        index += 1
    return f"{name}{index}"
