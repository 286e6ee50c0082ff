"""
Wallet credentials holder.

Passive and immutable: keeps what a chain client hands back after generating
or loading a wallet. Secrets stay out of repr().
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class Wallet:
    """
    Address and key pair of a single wallet.

    INVARIANTS:
    1. addr, pub_key, priv_key are non-empty strings
    2. mnemonic, when present, is a non-empty string
    """
    addr: str
    pub_key: str
    priv_key: str = field(repr=False)
    mnemonic: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for name in ("addr", "pub_key", "priv_key"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string")
        if self.mnemonic is not None and (
            not isinstance(self.mnemonic, str) or not self.mnemonic
        ):
            raise ValueError("mnemonic must be a non-empty string or None")

    @classmethod
    def create(
        cls,
        addr: str,
        pub_key: str,
        priv_key: str,
        mnemonic: Optional[str] = None,
    ) -> Wallet:
        return cls(addr, pub_key, priv_key, mnemonic)

    @property
    def has_mnemonic(self) -> bool:
        return self.mnemonic is not None
