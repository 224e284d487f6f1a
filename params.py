# params.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict
import math
from utils import lg_w, ceil_div

HASH_FAMILIES = ("sha2", "shake")

@dataclass(frozen=True)
class WOTSParams:
    """
    Parameter container for WOTS+ (RFC 8391, Section 5.2).
    name: parameter set name, e.g. WOTSP-SHA2_256
    n: bytes (message, key and signature element length)
    w: Winternitz parameter (4 or 16)
    hash_family: "sha2" or "shake"
    oid: one-byte identifier used in the serialized form
    """
    name: str = field(default="WOTSP-SHA2_256", compare=False)
    n: int = 32
    w: int = 16
    hash_family: str = "sha2"
    oid: int = 1

    def __post_init__(self) -> None:
        if self.n not in (32, 64):
            raise ValueError("n must be 32 or 64")
        lg_w(self.w)  # rejects w outside {4, 16}
        if self.hash_family not in HASH_FAMILIES:
            raise ValueError(f"unknown hash family: {self.hash_family}")
        if not 0 <= self.oid <= 0xFF:
            raise ValueError("oid must fit in one byte")

    @property
    def lg_w(self) -> int:
        return lg_w(self.w)

    @property
    def len_1(self) -> int:
        # len_1 = ceil(8n / lg(w))
        return math.ceil((8 * self.n) / self.lg_w)

    @property
    def len_2(self) -> int:
        # len_2 = floor(lg(len_1*(w-1))/lg(w)) + 1
        v = self.len_1 * (self.w - 1)
        return (v.bit_length() - 1) // self.lg_w + 1

    @property
    def length(self) -> int:
        return self.len_1 + self.len_2

    @property
    def len_2_bytes(self) -> int:
        # ceil((len_2*lg(w))/8)
        return ceil_div(self.len_2 * self.lg_w, 8)

    @property
    def pk_bytes(self) -> int:
        return self.length * self.n

    @property
    def sig_bytes(self) -> int:
        return self.length * self.n


WOTSP_SHA2_256 = WOTSParams("WOTSP-SHA2_256", n=32, w=16, hash_family="sha2", oid=1)
WOTSP_SHA2_512 = WOTSParams("WOTSP-SHA2_512", n=64, w=16, hash_family="sha2", oid=2)
WOTSP_SHAKE_256 = WOTSParams("WOTSP-SHAKE_256", n=32, w=16, hash_family="shake", oid=3)
WOTSP_SHAKE_512 = WOTSParams("WOTSP-SHAKE_512", n=64, w=16, hash_family="shake", oid=4)

PARAMETER_SETS: Dict[str, WOTSParams] = {
    p.name: p for p in (WOTSP_SHA2_256, WOTSP_SHA2_512, WOTSP_SHAKE_256, WOTSP_SHAKE_512)
}

DEFAULT_PARAMS = WOTSP_SHA2_256

def get_params(name: str) -> WOTSParams:
    """Look up a named parameter set (case-insensitive)."""
    try:
        return PARAMETER_SETS[name.upper()]
    except KeyError:
        raise ValueError(f"unknown WOTS+ parameter set: {name}") from None

def params_from_oid(oid: int) -> WOTSParams:
    for p in PARAMETER_SETS.values():
        if p.oid == oid:
            return p
    raise ValueError(f"unknown WOTS+ parameter oid: {oid}")
