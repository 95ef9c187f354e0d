"""Credential and Region value objects."""
from __future__ import annotations

import dataclasses

import pytest

from hunyuan_sdk.hunyuan import Credential, Region


def test_region_known_constants():
    assert Region.AP_BEIJING.as_str() == "ap-beijing"
    assert Region.AP_GUANGZHOU.as_str() == "ap-guangzhou"
    assert not Region.AP_GUANGZHOU.is_custom


def test_region_parse_known_is_case_insensitive():
    assert Region.parse("AP-Beijing") == Region.AP_BEIJING
    assert Region.parse(" ap-guangzhou ") is Region.AP_GUANGZHOU


def test_region_custom_round_trips():
    r = Region.custom("eu-frankfurt")
    assert r.is_custom
    assert r.as_str() == "eu-frankfurt"
    assert str(r) == "eu-frankfurt"
    assert Region.parse("na-siliconvalley").as_str() == "na-siliconvalley"


@pytest.mark.parametrize("name", ["", "   "])
def test_region_rejects_empty_names(name):
    with pytest.raises(ValueError):
        Region.custom(name)


def test_credential_repr_never_shows_secret():
    cred = Credential("AKIDexampleSecretId0123456789", "topSecretKeyValue123", token="sess-token-value")
    text = repr(cred)
    assert "topSecretKeyValue123" not in text
    assert "sess-token-value" not in text
    assert "AKIDexampleSecretId0123456789" not in text
    assert "token_present=True" in text
    assert str(cred) == text


def test_credential_is_immutable():
    cred = Credential("id", "key")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cred.secret_id = "other"  # type: ignore[misc]
    assert cred.token is None
