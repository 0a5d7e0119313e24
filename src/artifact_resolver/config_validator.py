"""
Environment lookup and validation helpers for ResolverConfig.

Values that look like template leftovers (".env.example" style markers) are
treated as unset: required keys fail, optional keys fall back with a warning.
"""
import os
import re
import warnings
from typing import Callable, Optional, TypeVar

from .exceptions import ConfigurationError

T = TypeVar("T")

_TEMPLATE_MARKERS = re.compile(r"your_|placeholder|xxx|replace|changeme|<[^>]*>", re.IGNORECASE)
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def looks_like_template(value: Optional[str]) -> bool:
    """True when an env value was copied from a template without being filled in."""
    return bool(value) and _TEMPLATE_MARKERS.search(value) is not None


def redact(value: str) -> str:
    """Show only the first and last two characters of a secret."""
    if len(value) < 8:
        return "<redacted>"
    return f"{value[:2]}<redacted>{value[-2:]}"


def get_required_env(key: str, description: str = None) -> str:
    """
    Read an environment variable that the resolver cannot run without.

    :param key: Environment variable name
    :param description: What the value is used for, shown in the error
    :raises: ConfigurationError if unset, empty or a template value
    """
    value = os.getenv(key)

    if not value:
        raise ConfigurationError(
            f"{key} is required but not set "
            f"(export it or add it to .env). Used for: {description or key}"
        )

    if looks_like_template(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value ({redact(value)}); set the real value."
        )

    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Read an optional environment variable.

    A template value is ignored with a UserWarning and ``default`` is returned.
    """
    value = os.getenv(key)
    if value is None:
        return default

    if looks_like_template(value):
        warnings.warn(f"Ignoring placeholder value for {key}", UserWarning)
        return default

    return value


def get_bool_env(key: str, default: bool) -> bool:
    value = get_optional_env(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def parse_number(value: str, key: str, cast: Callable[[str], T] = float) -> T:
    """
    Convert an environment value to a number.

    :raises: ConfigurationError if the value is not numeric
    """
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got {value!r}")


def validate_threshold(value: float, name: str) -> float:
    """
    Validate a score threshold.

    :raises: ConfigurationError if outside [0.0, 1.0]
    """
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be between 0.0 and 1.0, got {value}")
    return value


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate a registry file path.

    :raises: ConfigurationError if empty, or missing when ``must_exist``
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.isfile(path):
        raise ConfigurationError(f"{path_name} does not exist: {path}")

    return path
