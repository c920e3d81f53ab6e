"""Action input resolution.

Inputs are read from a mapping of names to values, ``os.environ`` unless
the caller injects another one.
"""

import os
import re
from typing import Mapping, Optional

from setup_php.logging import get_logger

logger = get_logger(__name__)

SUPPORTED_VERSIONS = ("5.6", "7.0", "7.1", "7.2", "7.3", "7.4")
LATEST_VERSION = SUPPORTED_VERSIONS[-1]

VERSION_QUALIFIER = re.compile(r"-?(dev|nightly|snapshot)$", re.IGNORECASE)


def input_key(name: str) -> str:
    """Environment key under which the runner passes an action input."""
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(
    name: str, mandatory: bool = False, inputs: Optional[Mapping[str, str]] = None
) -> str:
    """Read an input by exact name, then by its ``INPUT_`` key.

    Returns an empty string when neither is set. A missing mandatory
    input is only logged; callers decide what to do about it.
    """
    if inputs is None:
        inputs = os.environ

    value = inputs.get(name)
    if value:
        return value

    value = (inputs.get(input_key(name)) or "").strip()
    if not value and mandatory:
        logger.debug({"event": "missing_input", "name": name})
    return value


def get_version(inputs: Optional[Mapping[str, str]] = None) -> str:
    """Requested PHP version, or the latest supported one if unsupported."""
    requested = get_input("php-version", True, inputs)
    version = VERSION_QUALIFIER.sub("", requested.strip())

    if version in SUPPORTED_VERSIONS:
        return version

    logger.warning(
        {
            "event": "unsupported_php_version",
            "requested": requested,
            "using": LATEST_VERSION,
        }
    )
    return LATEST_VERSION
