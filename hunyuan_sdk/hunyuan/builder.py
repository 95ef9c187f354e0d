"""Staged builder for :class:`Client`.

Every setting is optional until :meth:`ClientBuilder.build`, which applies
defaults and raises :class:`ConfigurationError` when no usable credential was
supplied. An explicit ``debug(...)`` wins over ``TENCENTCLOUD_SDK_DEBUG``.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

import httpx

from ..base.errors import ConfigurationError
from ..base.http import get_httpx_client
from ..config import get_client_config
from ..config.defaults import HUNYUAN_DEFAULT_ENDPOINT, HUNYUAN_DEFAULT_REGION
from ..config.env import env_debug_enabled
from .client import Client
from .credential import Credential, Region

_HTTP_POOL_PURPOSE = "hunyuan"


def normalize_endpoint(endpoint: str) -> str:
    """Strip a scheme and trailing slashes so the value is a bare host."""
    value = endpoint.strip()
    for scheme in ("https://", "http://"):
        if value.lower().startswith(scheme):
            value = value[len(scheme):]
            break
    return value.rstrip("/")


def _require_ascii(name: str, value: Optional[str]) -> None:
    if value is not None and not value.isascii():
        raise ConfigurationError(f"{name} must be ASCII; it is sent as an HTTP header value")


class ClientBuilder:
    """Fluent builder; each setter returns the builder."""

    def __init__(self) -> None:
        self._http: Optional[httpx.Client] = None
        self._credential: Optional[Credential] = None
        self._region: Optional[Region] = None
        self._endpoint: Optional[str] = None
        self._debug: Optional[bool] = None
        self._language: Optional[str] = None
        self._clock: Optional[Callable[[], float]] = None

    @classmethod
    def from_env(cls) -> "ClientBuilder":
        """Seed a builder from ``TENCENTCLOUD_*`` / ``HUNYUAN_*`` variables.

        Values set afterwards on the builder take precedence.
        """
        cfg = get_client_config()
        builder = cls()
        if cfg.get("secret_id") and cfg.get("secret_key"):
            builder.credential(Credential(cfg["secret_id"], cfg["secret_key"], cfg.get("token")))
        builder.region(cfg["region"])
        builder.endpoint(cfg["endpoint"])
        if "debug" in cfg:
            builder.debug(cfg["debug"])
        return builder

    def http(self, http: httpx.Client) -> "ClientBuilder":
        """Use a caller-owned ``httpx.Client`` instead of the shared pool."""
        self._http = http
        return self

    def credential(self, credential: Credential) -> "ClientBuilder":
        """Set credentials (required)."""
        self._credential = credential
        return self

    def region(self, region: Union[Region, str]) -> "ClientBuilder":
        """Set the target region (defaults to ``ap-guangzhou``)."""
        self._region = Region.parse(region) if isinstance(region, str) else region
        return self

    def endpoint(self, endpoint: str) -> "ClientBuilder":
        """Override the API host (defaults to ``hunyuan.tencentcloudapi.com``)."""
        self._endpoint = normalize_endpoint(endpoint)
        return self

    def debug(self, debug: bool) -> "ClientBuilder":
        self._debug = debug
        return self

    def language(self, language: str) -> "ClientBuilder":
        self._language = language
        return self

    def clock(self, clock: Callable[[], float]) -> "ClientBuilder":
        self._clock = clock
        return self

    def has_http(self) -> bool:
        return self._http is not None

    def has_credential(self) -> bool:
        return self._credential is not None

    def has_region(self) -> bool:
        return self._region is not None

    def has_endpoint(self) -> bool:
        return self._endpoint is not None

    def has_debug(self) -> bool:
        return self._debug is not None

    def build(self) -> Client:
        """Build the client.

        Raises:
            ConfigurationError: No credential, an empty secret id/key, or a
                header-bound value (secret id, token, region, endpoint,
                language) that is not ASCII.
        """
        credential = self._credential
        if credential is None:
            raise ConfigurationError("credential is required")
        if not credential.secret_id or not credential.secret_key:
            raise ConfigurationError("credential secret_id and secret_key must be non-empty")

        region = self._region or Region.parse(HUNYUAN_DEFAULT_REGION)
        endpoint = self._endpoint or HUNYUAN_DEFAULT_ENDPOINT
        for name, value in (
            ("secret_id", credential.secret_id),
            ("token", credential.token),
            ("region", region.as_str()),
            ("endpoint", endpoint),
            ("language", self._language),
        ):
            _require_ascii(name, value)

        extra = {"clock": self._clock} if self._clock is not None else {}
        return Client(
            http=self._http if self._http is not None else get_httpx_client(_HTTP_POOL_PURPOSE),
            credential=credential,
            region=region,
            endpoint=endpoint,
            debug=self._debug if self._debug is not None else env_debug_enabled(),
            language=self._language,
            **extra,
        )


__all__ = ["ClientBuilder", "normalize_endpoint"]
