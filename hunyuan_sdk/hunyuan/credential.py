"""Credential and region value objects.

Both are immutable. ``Credential`` never renders its secret key or session
token in ``repr``; ``Region`` is a closed set of known names plus a custom
escape hatch, and ``as_str`` is total and always non-empty.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional

from ..base.masking import mask


@dataclass(frozen=True)
class Credential:
    """Secret id/key pair with an optional session token (``X-TC-Token``)."""

    secret_id: str
    secret_key: str = field(repr=False)
    token: Optional[str] = field(default=None, repr=False)

    def __repr__(self) -> str:
        return (
            f"Credential(secret_id={mask(self.secret_id)!r}, "
            f"secret_key='***', token_present={self.token is not None})"
        )

    __str__ = __repr__


@dataclass(frozen=True)
class Region:
    """Target region name sent as ``X-TC-Region``.

    Use :attr:`AP_BEIJING` / :attr:`AP_GUANGZHOU` or :meth:`custom`.
    """

    name: str

    AP_BEIJING: ClassVar["Region"]
    AP_GUANGZHOU: ClassVar["Region"]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("region name must be a non-empty string")

    @classmethod
    def custom(cls, name: str) -> "Region":
        return cls(name.strip())

    @classmethod
    def parse(cls, name: str) -> "Region":
        """Return the known region for ``name`` or a custom one."""
        key = name.strip().lower()
        return _KNOWN.get(key) or cls.custom(name)

    @property
    def is_custom(self) -> bool:
        return self.name not in _KNOWN

    def as_str(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


Region.AP_BEIJING = Region("ap-beijing")
Region.AP_GUANGZHOU = Region("ap-guangzhou")

_KNOWN: Dict[str, Region] = {r.name: r for r in (Region.AP_BEIJING, Region.AP_GUANGZHOU)}


__all__ = ["Credential", "Region"]
