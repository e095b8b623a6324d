"""
Connection descriptors: driver classes, URLs and settings.
"""

from .settings import ConnectionSettings
from .urls import (
    NATIVE_DRIVER_CLASS,
    ODBC_DRIVER_CLASS,
    append_extra_options,
    build_url,
    build_url_with_options,
    driver_class,
)

__all__ = [
    "ConnectionSettings",
    "NATIVE_DRIVER_CLASS",
    "ODBC_DRIVER_CLASS",
    "append_extra_options",
    "build_url",
    "build_url_with_options",
    "driver_class",
]
