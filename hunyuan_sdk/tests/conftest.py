"""Pytest configuration for the Hunyuan client test suite.

Every test starts from an environment without ``TENCENTCLOUD_*`` /
``HUNYUAN_*`` variables and with a fresh HTTP pool and timeout cache, so
results do not depend on the developer's shell.
"""

from __future__ import annotations

from typing import Callable, Iterator

import pytest

from hunyuan_sdk.base.http import close_all_clients
from hunyuan_sdk.base.timeouts import reset_timeout_config
from hunyuan_sdk.hunyuan import Client, ClientBuilder, Credential, Region
from hunyuan_sdk.mock import CannedTransport

FIXED_TS = 1700000000  # 2023-11-14T22:13:20Z
SECRET_ID = "AKIDexampleSecretId0123456789"
SECRET_KEY = "exampleSecretKey9876543210abcdef"  # pragma: allowlist secret - test value

_ENV_VARS = (
    "TENCENTCLOUD_SECRET_ID",
    "TENCENTCLOUD_SECRET_KEY",
    "TENCENTCLOUD_SESSION_TOKEN",
    "TENCENTCLOUD_TOKEN",
    "TENCENTCLOUD_REGION",
    "TENCENTCLOUD_SDK_DEBUG",
    "HUNYUAN_ENDPOINT",
    "HUNYUAN_HTTP_TIMEOUT_SECONDS",
    "HUNYUAN_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove client-related variables and reset process caches."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_timeout_config()
    yield
    close_all_clients()
    reset_timeout_config()


@pytest.fixture()
def credential() -> Credential:
    return Credential(SECRET_ID, SECRET_KEY)


@pytest.fixture()
def make_client(credential: Credential) -> Callable[..., Client]:
    """Return a factory building a client wired to a canned transport."""

    def _make(canned: CannedTransport, **overrides) -> Client:
        builder = (
            ClientBuilder()
            .http(canned.client())
            .credential(overrides.pop("credential", credential))
            .region(overrides.pop("region", Region.AP_GUANGZHOU))
            .clock(overrides.pop("clock", lambda: FIXED_TS))
        )
        if "debug" in overrides:
            builder.debug(overrides.pop("debug"))
        if "language" in overrides:
            builder.language(overrides.pop("language"))
        if "endpoint" in overrides:
            builder.endpoint(overrides.pop("endpoint"))
        return builder.build()

    return _make
