"""
Connection settings resolved from code or the environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..core.errors import DialectConfigurationError
from ..core.types import AccessMode
from ..utils import env_value, parse_int, parse_options
from .redaction import redact_options
from .urls import append_extra_options, build_url, build_url_with_options, driver_class

if TYPE_CHECKING:
    from ..dialects.base import DialectCapabilities


@dataclass(frozen=True)
class ConnectionSettings:
    """
    Normalized connection parameters handed over by the engine.
    """

    database: str
    access_mode: AccessMode = AccessMode.NATIVE
    hostname: str | None = None
    port: str | None = None
    options: dict[str, str] = field(default_factory=dict, hash=False)
    source: str | None = None

    @classmethod
    def from_env(cls, prefix: str = "GBASE", **overrides: Any) -> "ConnectionSettings":
        """
        Build settings from ``<prefix>_ACCESS_MODE``, ``<prefix>_HOST``,
        ``<prefix>_PORT``, ``<prefix>_DATABASE`` and ``<prefix>_OPTIONS``.
        """

        database = env_value(f"{prefix}_DATABASE")
        if database is None and "database" not in overrides:
            raise DialectConfigurationError(f"Environment variable {prefix}_DATABASE is not set")

        mode_value = env_value(f"{prefix}_ACCESS_MODE")
        access_mode = AccessMode.parse(mode_value) if mode_value else AccessMode.NATIVE

        port = env_value(f"{prefix}_PORT")
        if port is not None:
            port = str(parse_int(port, key=f"{prefix}_PORT"))

        options_value = env_value(f"{prefix}_OPTIONS")
        options = parse_options(options_value) if options_value else {}

        values: dict[str, Any] = {
            "database": database,
            "access_mode": access_mode,
            "hostname": env_value(f"{prefix}_HOST"),
            "port": port,
            "options": options,
            "source": prefix,
        }
        values.update(overrides)
        return cls(**values)

    def driver_class(self) -> str:
        return driver_class(self.access_mode)

    def url(self, capabilities: "DialectCapabilities") -> str:
        return build_url_with_options(
            self.access_mode,
            self.hostname,
            self.port,
            self.database,
            self.options,
            capabilities,
        )

    def redacted_url(self, capabilities: "DialectCapabilities") -> str:
        """
        Return the URL with sensitive option values masked, safe for logging.
        """

        base = build_url(self.access_mode, self.hostname, self.port, self.database)
        return append_extra_options(base, redact_options(self.options), capabilities)

    def descriptive_label(self, capabilities: "DialectCapabilities") -> str:
        redacted = self.redacted_url(capabilities)
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted
