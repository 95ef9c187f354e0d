from __future__ import annotations

from hunyuan_sdk.base.masking import mask, mask_authorization


def test_mask_short_values_fully_hidden():
    assert mask(None) == "***"
    assert mask("") == "***"
    assert mask("abc") == "***"
    assert mask("a" * 16) == "***"


def test_mask_keeps_prefix_and_suffix():
    assert mask("0123456789abcdefXYZ") == "01234567...bcdefXYZ"


def test_mask_authorization_hides_id_and_signature():
    secret_id = "AKIDexampleSecretId0123456789"
    signature = "f" * 20 + "0" * 24 + "e" * 20
    value = (
        f"TC3-HMAC-SHA256 Credential={secret_id}/2023-11-14/hunyuan/tc3_request, "
        f"SignedHeaders=content-type;host, Signature={signature}"
    )
    masked = mask_authorization(value)
    assert secret_id not in masked
    assert signature not in masked
    assert "Credential=AKIDexam...23456789/2023-11-14/hunyuan/tc3_request" in masked
    assert "SignedHeaders=content-type;host" in masked
    assert masked.endswith("Signature=ffffffff...eeeeeeee")


def test_mask_authorization_missing_and_unstructured():
    assert mask_authorization(None) == "<missing>"
    assert mask_authorization("Bearer 0123456789abcdefXYZ") == "Bearer 0...bcdefXYZ"
