#!/usr/bin/env python3
"""
asset_demo.py — Walkthrough of the Asset primitive

================================================================================
THE PROBLEM
================================================================================

    >>> 0.1 + 0.2
    0.30000000000000004

Token balances routinely carry 8 to 18 fractional digits. Floats cannot hold
them, and silently rounding a balance is a bug you find in an audit.

================================================================================
THE APPROACH
================================================================================

An amount is an integer significand plus a scale plus a symbol:

    Asset.from_natural("14.0003", "BIP")  ->  significand=140003, precision=4

Arithmetic only combines amounts with the same symbol and scale. Anything
else is an error the caller must resolve explicitly.

================================================================================
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from asset import Asset, AssetError, add, mul


def demonstrate_parsing():
    print("=" * 60)
    print("PARSING AND FORMATTING")
    print("=" * 60)
    print()
    for text in ("14.0003", "+3.14", "03.14", "-0.0003", "0"):
        a = Asset.from_natural(text, "bip")
        print(f"{text!r:>12} -> significand={a.significand}, "
              f"precision={a.precision}, natural={a.natural()!r}")
    print()


def demonstrate_rejections():
    print("=" * 60)
    print("REJECTED INPUT")
    print("=" * 60)
    print()
    for text in ("", "3.", ".14", "3.1.4", "31.41e10", "0.000", "1" * 19):
        try:
            Asset.from_natural(text, "bip")
        except AssetError as e:
            print(f"{text!r:>24} -> {type(e).__name__}: {e}")
    print()


def demonstrate_arithmetic():
    print("=" * 60)
    print("ARITHMETIC")
    print("=" * 60)
    print()
    price = Asset.from_natural("3.14", "BIP")
    print(f"price             = {price}")
    print(f"price + price     = {add(price, price)}")
    print(f"price - price     = {price - price}")
    print(f"price * 3         = {mul(price, 3)}")
    print(f"price * 0         = {price * 0}")
    print(f"price unchanged   = {price}")
    print()
    try:
        price + Asset.from_natural("3.1", "BIP")
    except AssetError as e:
        print(f"3.14 + 3.1        -> {type(e).__name__}: {e}")
    try:
        price + Asset.from_natural("3.14", "BTC")
    except AssetError as e:
        print(f"BIP + BTC         -> {type(e).__name__}: {e}")
    print()


def demonstrate_equality():
    print("=" * 60)
    print("STRUCTURAL EQUALITY")
    print("=" * 60)
    print()
    a = Asset.from_natural("3.10", "BIP")
    b = Asset.from_natural("3.1", "BIP")
    print(f"{a} == {b}: {a == b}  (scale is part of the value)")
    print()


if __name__ == "__main__":
    demonstrate_parsing()
    demonstrate_rejections()
    demonstrate_arithmetic()
    demonstrate_equality()
