"""
JDBC driver and URL construction for GBase connections.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from ..core.errors import UnsupportedAccessModeError
from ..core.types import AccessMode
from ..utils import get_logger
from .redaction import redact_options

if TYPE_CHECKING:
    from ..dialects.base import DialectCapabilities

ODBC_DRIVER_CLASS = "sun.jdbc.odbc.JdbcOdbcDriver"
NATIVE_DRIVER_CLASS = "com.gbase.jdbc.Driver"

ODBC_URL_PREFIX = "jdbc:odbc:"
NATIVE_URL_PREFIX = "jdbc:gbase://"

logger = get_logger("connection.urls")


def driver_class(access_mode: AccessMode) -> str:
    if access_mode is AccessMode.ODBC:
        return ODBC_DRIVER_CLASS
    return NATIVE_DRIVER_CLASS


def build_url(access_mode: AccessMode, hostname: str | None, port: str | None, database: str) -> str:
    """
    Build the base connection URL.

    ODBC addresses a data source by name, so hostname and port are ignored.
    An empty port on a native connection leaves the driver default in place.
    Other access modes have no URL form and raise
    :class:`UnsupportedAccessModeError`.
    """

    if access_mode is AccessMode.ODBC:
        return f"{ODBC_URL_PREFIX}{database}"
    if access_mode is AccessMode.NATIVE:
        if not port:
            return f"{NATIVE_URL_PREFIX}{hostname}/{database}"
        return f"{NATIVE_URL_PREFIX}{hostname}:{port}/{database}"
    logger.warning("Rejecting URL construction for access mode %s", access_mode)
    raise UnsupportedAccessModeError(access_mode)


def append_extra_options(url: str, options: Mapping[str, str] | None, capabilities: "DialectCapabilities") -> str:
    """
    Append vendor options as ``key=value`` pairs after the option indicator.
    """

    if not options:
        return url
    indicator = capabilities.extra_option_indicator
    separator = capabilities.extra_option_separator
    pairs = separator.join(f"{key}={value}" for key, value in options.items())
    if indicator in url:
        return f"{url}{separator}{pairs}"
    return f"{url}{indicator}{pairs}"


def build_url_with_options(
    access_mode: AccessMode,
    hostname: str | None,
    port: str | None,
    database: str,
    options: Mapping[str, str] | None,
    capabilities: "DialectCapabilities",
) -> str:
    base = build_url(access_mode, hostname, port, database)
    url = append_extra_options(base, options, capabilities)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built %s connection URL %s",
            access_mode.value,
            append_extra_options(base, redact_options(options or {}), capabilities),
        )
    return url
