# -*- coding: utf-8 -*-
"""
One-byte tetrabin codes for IUPAC nucleotide symbols.

Each symbol is packed into a single byte. The high nibble is the set of bases
the symbol may stand for (A=1000, G=0100, C=0010, T=0001, ambiguity codes are
ORs), the low nibble flags a definite base (1000), a gap (0100) or an unknown
position (0010). Every valid code is therefore non-zero and >= 16, and 0 is free
to mean "invalid symbol".

    A 10001000   R 11000000   V 11100000
    G 01001000   M 10100000   H 10110000
    C 00101000   W 10010000   D 11010000
    T 00011000   S 01100000   B 01110000
    K 01010000   Y 00110000   N 11110000
    - 11110100   ? 11110010

Lowercase input encodes to the same code as uppercase; decoding always
returns uppercase.

Public API
----------
- ALPHABET
- TETRABIN_SCHEME
- ENCODING_TABLE / DECODING_TABLE (256-byte tables for bytes.translate)
- encode_symbol / decode_symbol
- encode_bytes / decode_bytes
"""

from __future__ import annotations

from typing import Dict

from bitarray import bitarray
from bitarray.util import ba2int

__all__ = [
    "ALPHABET",
    "TETRABIN_SCHEME",
    "ENCODING_TABLE",
    "DECODING_TABLE",
    "encode_symbol",
    "decode_symbol",
    "encode_bytes",
    "decode_bytes",
]

TETRABIN_SCHEME: Dict[str, str] = {
    "A": "10001000", "G": "01001000", "C": "00101000", "T": "00011000",
    "R": "11000000", "M": "10100000", "W": "10010000", "S": "01100000",
    "K": "01010000", "Y": "00110000", "V": "11100000", "H": "10110000",
    "D": "11010000", "B": "01110000", "N": "11110000",
    "-": "11110100", "?": "11110010",
}

ALPHABET = "".join(TETRABIN_SCHEME)


def _make_translate_table(mapping: Dict[int, int]) -> bytes:
    table = bytearray(256)
    for src, dst in mapping.items():
        table[src] = dst
    return bytes(table)


def _build_tables() -> tuple:
    codes = {sym: ba2int(bitarray(bits)) for sym, bits in TETRABIN_SCHEME.items()}
    if len(set(codes.values())) != len(codes):
        raise ValueError("tetrabin scheme has colliding codes")

    forward: Dict[int, int] = {}
    for sym, code in codes.items():
        forward[ord(sym)] = code
        forward[ord(sym.lower())] = code
    inverse = {code: ord(sym) for sym, code in codes.items()}
    return _make_translate_table(forward), _make_translate_table(inverse)


ENCODING_TABLE, DECODING_TABLE = _build_tables()


def encode_symbol(symbol: int) -> int:
    """Code for one ASCII symbol byte, or 0 if it is not a nucleotide."""
    return ENCODING_TABLE[symbol]


def decode_symbol(code: int) -> int:
    """Uppercase ASCII symbol for a code, or 0 if the code is not defined."""
    return DECODING_TABLE[code]


def encode_bytes(seq: bytes) -> bytes:
    """Translate a whole sequence; invalid symbols come out as 0."""
    return seq.translate(ENCODING_TABLE)


def decode_bytes(seq: bytes) -> bytes:
    return seq.translate(DECODING_TABLE)
