"""Parsers for comma separated extension and php.ini inputs."""

from typing import List

ZEND_EXTENSIONS = frozenset({"xdebug", "opcache"})

EXTENSION_PREFIXES = ("php_", "php-")


def _split_csv(csv: str) -> List[str]:
    return [token.strip() for token in csv.split(",") if token.strip()]


def extension_array(csv: str) -> List[str]:
    """Extension names from a CSV list, without a ``php_`` or ``php-`` prefix."""
    extensions = []
    for token in _split_csv(csv):
        for prefix in EXTENSION_PREFIXES:
            if token.startswith(prefix):
                token = token[len(prefix):]
                break
        if token:
            extensions.append(token)
    return extensions


def ini_array(csv: str) -> List[str]:
    """php.ini directives from a CSV list, kept verbatim."""
    return _split_csv(csv)


def get_extension_prefix(extension: str) -> str:
    """php.ini directive used to load an extension."""
    if extension in ZEND_EXTENSIONS:
        return "zend_extension"
    return "extension"
