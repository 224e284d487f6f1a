# hashfuncs.py
from __future__ import annotations
import hashlib
from params import WOTSParams
from utils import to_bytes

# RFC 8391, Section 5.1: domain separation by an n-byte prefix toByte(x, n).
PADDING_F = 0
PADDING_PRF = 3

def core_hash(data: bytes, params: WOTSParams) -> bytes:
    if params.hash_family == "sha2":
        if params.n == 32:
            return hashlib.sha256(data).digest()
        return hashlib.sha512(data).digest()
    # SHAKE128 for n=32, SHAKE256 for n=64
    if params.n == 32:
        return hashlib.shake_128(data).digest(params.n)
    return hashlib.shake_256(data).digest(params.n)

def PRF(key_n: bytes, in_32: bytes, params: WOTSParams) -> bytes:
    """PRF(KEY, M) = HASH(toByte(3, n) || KEY || M), M is a 32-byte address or index."""
    n = params.n
    if len(key_n) != n:
        raise ValueError("PRF: key length != n")
    if len(in_32) != 32:
        raise ValueError("PRF: input length != 32")
    return core_hash(to_bytes(PADDING_PRF, n) + key_n + in_32, params)

def F(key_n: bytes, x_n: bytes, params: WOTSParams) -> bytes:
    """F(KEY, M) = HASH(toByte(0, n) || KEY || M)."""
    n = params.n
    if len(key_n) != n or len(x_n) != n:
        raise ValueError("F: length mismatch")
    return core_hash(to_bytes(PADDING_F, n) + key_n + x_n, params)
