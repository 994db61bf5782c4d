"""
Test suite for bignum

Contains:
- tests/unit/          : Unit tests for primitives, arithmetic and RSA decoding
"""
