"""
asset — Fixed-point amounts for fiat and crypto assets

An exact, immutable amount type: arbitrary-precision integer significand,
decimal precision and currency symbol. No floats, no rounding, no silent
rescaling.

================================================================================
QUICK START
================================================================================

Basic usage:

    from asset import Asset

    # Parse the natural (human) representation
    price = Asset.from_natural("3.14", "btc")
    price.significand, price.precision, price.symbol   # (314, 2, 'BTC')

    # Unit-safe arithmetic, always a new value
    total = price * 3
    str(total - price)                                 # '6.28 BTC'

    # Mixing scales or symbols is an error, not a conversion
    price + Asset.from_natural("3.1", "BTC")           # PrecisionMismatch

Collaborators (independent from the core):

    from asset.config import get_var
    from asset.wallet import Wallet

    node_url = get_var("MINTER_NODE_URL")

================================================================================
"""

from .core import (
    Asset,
    MAX_PRECISION,
    MAX_NATURAL_LENGTH,
    NATURAL_PATTERN,
    AssetError,
    InvalidPrecision,
    PrecisionOverflow,
    StringTooLong,
    InvalidFormat,
    UnitMismatch,
    PrecisionMismatch,
    SymbolMismatch,
    equals,
    add,
    sub,
    mul,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    # Core
    "Asset",
    "MAX_PRECISION",
    "MAX_NATURAL_LENGTH",
    "NATURAL_PATTERN",
    "equals",
    "add",
    "sub",
    "mul",
    # Errors
    "AssetError",
    "InvalidPrecision",
    "PrecisionOverflow",
    "StringTooLong",
    "InvalidFormat",
    "UnitMismatch",
    "PrecisionMismatch",
    "SymbolMismatch",
]
