"""
core.py — Domain Primitive for fixed-point asset amounts

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   An arbitrary-precision int significand plus a decimal precision (scale).
   value == significand / 10**precision. Never floating point.

2. UNIT SAFETY
   Arithmetic between different symbols or precisions raises.
   Nothing is rescaled or rounded behind the caller's back.

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.
   No operand is ever modified, safe for concurrent use.

4. CANONICAL ZERO
   A zero amount never carries a fractional scale: significand 0 => precision 0.
   Construction rejects the violation, arithmetic normalizes it away.

5. LOSSLESS TEXT
   from_natural() and natural() are exact inverses on canonical strings.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Final
import re


# ==============================================================================
# LIMITS
# ==============================================================================

# Up to 18 fractional digits: 0.999999999999999999 still fits.
MAX_PRECISION: Final[int] = 18

# Longest accepted natural string, sign and point included.
# Same number as MAX_PRECISION today, but a different quantity.
MAX_NATURAL_LENGTH: Final[int] = 18

NATURAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")

_INT64_MASK: Final[int] = (1 << 64) - 1


def _upper(symbol: str) -> str:
    """Upper-case one character at a time; "ß" stays "ß", never "SS"."""
    chars = []
    for char in symbol:
        upper = char.upper()
        chars.append(upper if len(upper) == 1 else char)
    return "".join(chars)


# ==============================================================================
# ERRORS
# ==============================================================================

class AssetError(ValueError):
    """Base class for every rejected asset value or operation."""


class InvalidPrecision(AssetError):
    """Zero amount with a fractional scale, or a negative scale."""


class PrecisionOverflow(AssetError):
    """Precision above MAX_PRECISION."""


class StringTooLong(AssetError):
    """Natural string longer than MAX_NATURAL_LENGTH."""


class InvalidFormat(AssetError):
    """Natural string does not match NATURAL_PATTERN."""


class UnitMismatch(AssetError, TypeError):
    """Operands are not unit-compatible."""


class PrecisionMismatch(UnitMismatch):
    pass


class SymbolMismatch(UnitMismatch):
    pass


# ==============================================================================
# ASSET CLASS
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Asset:
    """
    Domain Primitive for currency and crypto asset amounts.

    Works the same for fiat (USD, RUB, ...) and tokens (BTC, ETH, BIP, ...):
    the symbol is just a tag, the scale travels with each value.

    INVARIANTS:
    1. significand is always int (no floating point)
    2. 0 <= precision <= MAX_PRECISION
    3. significand == 0 implies precision == 0
    4. symbol is upper case

    EQUALITY is structural: Asset(310, 2, "X") != Asset(31, 1, "X")
    even though both read as 3.1. Callers rely on the strict check.

    USAGE:
        price = Asset.from_natural("3.14", "btc")
        total = price * 3              # 9.42 BTC
        str(total - price)             # '6.28 BTC'
    """
    significand: int
    precision: int
    symbol: str

    def __post_init__(self) -> None:
        if not isinstance(self.significand, int) or isinstance(self.significand, bool):
            raise TypeError(
                f"significand must be int, not {type(self.significand).__name__}"
            )
        if not isinstance(self.precision, int) or isinstance(self.precision, bool):
            raise TypeError(
                f"precision must be int, not {type(self.precision).__name__}"
            )
        if not isinstance(self.symbol, str):
            raise TypeError(f"symbol must be str, not {type(self.symbol).__name__}")

        if self.significand == 0 and self.precision != 0:
            raise InvalidPrecision(
                f"Zero value amount cannot have precision: {self.precision}"
            )
        if self.precision < 0:
            raise InvalidPrecision(f"Precision cannot be negative: {self.precision}")
        if self.precision > MAX_PRECISION:
            raise PrecisionOverflow(
                f"Precision overflow. Max value: {MAX_PRECISION}, got: {self.precision}"
            )

        # frozen: bypass __setattr__ to store the normalized symbol
        object.__setattr__(self, "symbol", _upper(self.symbol))

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_parts(cls, significand: int, precision: int, symbol: str) -> Asset:
        """
        Build from raw parts, no rescaling.

        from_parts(140003, 4, "btc") is 14.0003 BTC.

        Raises:
            InvalidPrecision: zero significand with precision != 0
            PrecisionOverflow: precision > MAX_PRECISION
        """
        return cls(significand, precision, symbol)

    @classmethod
    def from_natural(cls, text: str, symbol: str) -> Asset:
        """
        Parse the natural (human decimal) representation, e.g. "14.0003".

        Precision is the number of digits after the point, so "3.10" and
        "3.1" give different (and unequal) assets.

        Raises:
            StringTooLong: len(text) > MAX_NATURAL_LENGTH
            InvalidFormat: text is not [+-]digits[.digits]
            InvalidPrecision: zero written with a fractional part ("0.000")
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")

        if len(text) > MAX_NATURAL_LENGTH:
            raise StringTooLong(
                f"Amount length is too big. Max length: {MAX_NATURAL_LENGTH}. "
                f"Got: {len(text)}"
            )

        if NATURAL_PATTERN.fullmatch(text) is None:
            raise InvalidFormat(f"Not a decimal amount: {text!r}")

        integer_part, _, fraction = text.partition(".")
        significand = int(integer_part + fraction)

        return cls(significand, len(fraction), symbol)

    @classmethod
    def zero(cls, symbol: str) -> Asset:
        """Canonical zero for a symbol. Handy as the start value for sum()."""
        return cls(0, 0, symbol)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def natural(self) -> str:
        """
        Natural representation: "14.0003", "-0.0003", "314", "0".

        The fractional part always has exactly `precision` digits.
        """
        sign = "-" if self.significand < 0 else ""
        digits = str(abs(self.significand))

        if self.precision == 0:
            return sign + digits

        point_idx = len(digits) - self.precision
        if point_idx > 0:
            return f"{sign}{digits[:point_idx]}.{digits[point_idx:]}"
        return f"{sign}0.{'0' * -point_idx}{digits}"

    @property
    def amount(self) -> int:
        """
        Significand squeezed into a signed 64-bit integer.

        Only the low 64 bits survive. Use `significand` for the exact value.
        """
        low = abs(self.significand) & _INT64_MASK
        if low >= 1 << 63:
            low -= 1 << 64
        return -low if self.significand < 0 else low

    def is_zero(self) -> bool:
        return self.significand == 0

    def is_positive(self) -> bool:
        return self.significand > 0

    def is_negative(self) -> bool:
        return self.significand < 0

    def __str__(self) -> str:
        return f"{self.natural()} {self.symbol}"

    # -------------------------------------------------------------------------
    # Arithmetic (unit-safe)
    # -------------------------------------------------------------------------

    def __add__(self, other: Asset) -> Asset:
        if not isinstance(other, Asset):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Asset) -> Asset:
        if not isinstance(other, Asset):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, multiplier: int) -> Asset:
        """Multiply by an integer quantity. Fractions are not supported."""
        if isinstance(multiplier, Asset):
            return NotImplemented
        return mul(self, multiplier)

    def __rmul__(self, multiplier: int) -> Asset:
        return self.__mul__(multiplier)

    def __neg__(self) -> Asset:
        return Asset(-self.significand, self.precision, self.symbol)

    def __abs__(self) -> Asset:
        return Asset(abs(self.significand), self.precision, self.symbol)


# ==============================================================================
# OPERATIONS
# ==============================================================================

def equals(x: Asset, y: Asset) -> bool:
    """Structural comparison: significand, precision and symbol all equal."""
    if not isinstance(x, Asset) or not isinstance(y, Asset):
        raise TypeError(
            f"Cannot compare {type(x).__name__} and {type(y).__name__}"
        )
    return (
        x.significand == y.significand
        and x.precision == y.precision
        and x.symbol == y.symbol
    )


def _check_compatible(x: Asset, y: Asset) -> None:
    if not isinstance(x, Asset) or not isinstance(y, Asset):
        raise TypeError(
            f"Operation not permitted: {type(x).__name__} and {type(y).__name__}"
        )
    if x.precision != y.precision:
        raise PrecisionMismatch(
            f"Precision mismatch error: {x.precision} and {y.precision}"
        )
    if x.symbol != y.symbol:
        raise SymbolMismatch(f"Symbol mismatch error: {x.symbol} and {y.symbol}")


def _normalized(significand: int, precision: int, symbol: str) -> Asset:
    # a zero result drops its scale to stay canonical
    return Asset(significand, precision if significand else 0, symbol)


def add(x: Asset, y: Asset) -> Asset:
    """
    x + y as a new Asset. x and y must share symbol and precision.

    Raises:
        PrecisionMismatch, SymbolMismatch
    """
    _check_compatible(x, y)
    return _normalized(x.significand + y.significand, x.precision, x.symbol)


def sub(x: Asset, y: Asset) -> Asset:
    """
    x - y as a new Asset. x and y must share symbol and precision.

    Raises:
        PrecisionMismatch, SymbolMismatch
    """
    _check_compatible(x, y)
    return _normalized(x.significand - y.significand, x.precision, x.symbol)


def mul(x: Asset, multiplier: int) -> Asset:
    """
    x * multiplier as a new Asset. Only integer multipliers are accepted.

    Multiplying by 0 gives the canonical zero whatever the precision of x.
    """
    if not isinstance(x, Asset):
        raise TypeError(f"Operation not permitted: {type(x).__name__} * int")
    if not isinstance(multiplier, int) or isinstance(multiplier, bool):
        raise TypeError(
            f"Asset can only be multiplied by int (quantity), "
            f"not {type(multiplier).__name__}"
        )
    return _normalized(x.significand * multiplier, x.precision, x.symbol)
