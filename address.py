# address.py
from __future__ import annotations
from typing import Callable
import os
from utils import to_bytes, from_bytes

ADDRESS_BYTES = 32
PREFIX_BYTES = 20

class Address:
    """
    RFC 8391, Section 2.5: 32-byte address, kept as a raw byte buffer.
    Layout:
      [0:4)   layer          \\
      [4:12)  tree (64 bit)   | reserved prefix, owned by the tree layer above
      [12:16) type            |
      [16:20) OTS address    /
      [20:24) chain
      [24:28) hash
      [28:32) keyAndMask
    All fields are big-endian.
    """

    def __init__(self, data: bytes = bytes(ADDRESS_BYTES)) -> None:
        if len(data) != ADDRESS_BYTES:
            raise ValueError("address must be 32 bytes")
        self._data = bytearray(data)

    @classmethod
    def new(cls, rng: Callable[[int], bytes] = os.urandom) -> "Address":
        return cls(rng(ADDRESS_BYTES))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Address":
        return cls(data)

    def copy(self) -> "Address":
        return Address(bytes(self._data))

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Address({self._data.hex()})"

    def _set_word(self, offset: int, value: int) -> None:
        self._data[offset:offset + 4] = to_bytes(value & 0xFFFFFFFF, 4)

    def _get_word(self, offset: int) -> int:
        return from_bytes(self._data[offset:offset + 4])

    # WOTS+ fields
    def set_chain(self, chain: int) -> None:
        self._set_word(20, chain)

    def get_chain(self) -> int:
        return self._get_word(20)

    def set_hash(self, ha: int) -> None:
        self._set_word(24, ha)

    def get_hash(self) -> int:
        return self._get_word(24)

    def set_keymask(self, km: int) -> None:
        self._set_word(28, km)

    def get_keymask(self) -> int:
        return self._get_word(28)

    # Reserved prefix, opaque to WOTS+ itself
    def set_prefix(self, prefix: bytes) -> None:
        if len(prefix) != PREFIX_BYTES:
            raise ValueError("address prefix must be 20 bytes")
        self._data[0:PREFIX_BYTES] = prefix

    def get_prefix(self) -> bytes:
        return bytes(self._data[0:PREFIX_BYTES])

    def set_layer(self, layer: int) -> None:
        self._set_word(0, layer)

    def set_tree(self, tree: int) -> None:
        self._data[4:12] = to_bytes(tree & ((1 << 64) - 1), 8)

    def set_type(self, t: int) -> None:
        # RFC: when type changes, clear following words to 0
        self._set_word(12, t)
        self._data[16:32] = bytes(16)

    def set_ots(self, ots: int) -> None:
        self._set_word(16, ots)
