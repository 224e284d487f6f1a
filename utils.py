# utils.py
from __future__ import annotations
from typing import List

def to_bytes(x: int, outlen: int) -> bytes:
    """RFC 8391, Section 2.4: big-endian integer-to-byte."""
    if x < 0:
        raise ValueError("x must be non-negative")
    if x >> (8 * outlen):
        raise ValueError(f"x does not fit in {outlen} bytes")
    return x.to_bytes(outlen, "big", signed=False)

def from_bytes(data: bytes) -> int:
    return int.from_bytes(data, "big", signed=False)

def xor_bytes(a: bytes, b: bytes) -> bytes:
    if len(a) != len(b):
        raise ValueError("xor length mismatch")
    return bytes(x ^ y for x, y in zip(a, b))

def ceil_div(a: int, b: int) -> int:
    return (a + b - 1) // b

def lg_w(w: int) -> int:
    # RFC limits w to {4, 16}; both divide a byte evenly.
    if w not in (4, 16):
        raise ValueError("w must be 4 or 16")
    return w.bit_length() - 1

def base_w(x: bytes, w: int, out_len: int) -> List[int]:
    """
    RFC 8391, Section 2.6 (Algorithm 1): interpret byte-string as base-w digits,
    most significant bits of each byte first.
    """
    logw = lg_w(w)
    if out_len * logw > len(x) * 8:
        raise ValueError("base_w: out_len too large for input length")

    res: List[int] = []
    idx = 0
    bits = 0
    total = 0
    for _ in range(out_len):
        if bits == 0:
            total = x[idx]
            idx += 1
            bits = 8
        bits -= logw
        res.append((total >> bits) & (w - 1))
    return res
