"""Utility helpers shared by the EmbryoDoc configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from urllib.parse import urlsplit

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None) -> Path | None:
    """Return a ``Path`` for non-empty values, otherwise None."""
    text = _optional_str(value)
    return Path(text).expanduser() if text else None


def _require_absolute_url(value: object) -> str:
    """Return ``value`` as a URL string without a trailing slash.

    Raises
    ------
    SiteConfigError
        If the value is not an absolute ``http`` or ``https`` URL.
    """
    text = _optional_str(value) or ""
    parts = urlsplit(text)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        msg = f"Site 'url' must be an absolute http(s) URL, got {text!r}."
        raise SiteConfigError(msg)
    return text.rstrip("/")


def _parse_bool(key: str, value: object) -> bool:
    """Accept YAML booleans only; reject strings such as ``'yes'``."""
    match value:
        case bool() as flag:
            return flag
        case _:
            msg = f"Site '{key}' must be a boolean, got {value!r}."
            raise SiteConfigError(msg)


def _mapping(payload: object, name: str) -> typ.Mapping[str, typ.Any]:
    """Return ``payload`` as a mapping, treating None as empty."""
    match payload:
        case None:
            return {}
        case dict() as data:
            return data
        case _:
            msg = f"'{name}' configuration must be a mapping."
            raise SiteConfigError(msg)


__all__ = [
    "_mapping",
    "_optional_path",
    "_optional_str",
    "_parse_bool",
    "_require_absolute_url",
]
