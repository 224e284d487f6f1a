# serialize.py
from __future__ import annotations
from typing import List, Tuple
import struct
from params import HASH_FAMILIES, WOTSParams, params_from_oid
from address import Address, ADDRESS_BYTES
from wots import WOTSPublicKey, WOTSSignature

# Format:
#  - magic 4B: b"WOTS"
#  - version u8
#  - oid u8, n u16, w u16, hash family u8 (0 sha2, 1 shake)
#  - body: chains (len*n) || pub_seed(n) || address(32)
# The *_to_bytes / *_from_bytes pair writes the body alone.

MAGIC = b"WOTS"
VERSION = 1
HEADER = struct.Struct(">4sBBHHB")

def chains_to_bytes(chains: List[bytes]) -> bytes:
    return b"".join(chains)

def chains_from_bytes(data: bytes, params: WOTSParams) -> List[bytes]:
    n = params.n
    if len(data) != params.length * n:
        raise ValueError("chain block has the wrong length")
    return [data[i*n:(i+1)*n] for i in range(params.length)]

def _body(chains: List[bytes], pub_seed: bytes, address: Address) -> bytes:
    return chains_to_bytes(chains) + pub_seed + address.to_bytes()

def _split_body(data: bytes, params: WOTSParams) -> Tuple[List[bytes], bytes, Address]:
    n = params.n
    if len(data) != params.length * n + n + ADDRESS_BYTES:
        raise ValueError("Bad length for parameter set " + params.name)
    off = params.length * n
    chains = chains_from_bytes(data[:off], params)
    pub_seed = data[off:off+n]; off += n
    address = Address.from_bytes(data[off:off+ADDRESS_BYTES])
    return chains, pub_seed, address

def _header(params: WOTSParams) -> bytes:
    return HEADER.pack(MAGIC, VERSION, params.oid, params.n, params.w,
                       HASH_FAMILIES.index(params.hash_family))

def _params_from_header(oid: int, n: int, w: int, family: int) -> WOTSParams:
    if family >= len(HASH_FAMILIES):
        raise ValueError("Unknown hash family")
    hash_family = HASH_FAMILIES[family]
    try:
        known = params_from_oid(oid)
    except ValueError:
        known = None
    # Registry sets keep their identity; anything else is rebuilt from the header.
    if known is not None and (known.n, known.w, known.hash_family) == (n, w, hash_family):
        return known
    return WOTSParams(name=f"WOTSP-custom-{oid}", n=n, w=w, hash_family=hash_family, oid=oid)

def _decode(data: bytes) -> Tuple[List[bytes], bytes, Address, WOTSParams]:
    if len(data) < HEADER.size:
        raise ValueError("Truncated header")
    magic, ver, oid, n, w, family = HEADER.unpack_from(data)
    if magic != MAGIC:
        raise ValueError("Bad magic")
    if ver != VERSION:
        raise ValueError("Unsupported version")
    params = _params_from_header(oid, n, w, family)
    chains, pub_seed, address = _split_body(data[HEADER.size:], params)
    return chains, pub_seed, address, params

def public_key_to_bytes(pk: WOTSPublicKey) -> bytes:
    return _body(pk.chains, pk.pub_seed, pk.address)

def public_key_from_bytes(data: bytes, params: WOTSParams) -> WOTSPublicKey:
    chains, pub_seed, address = _split_body(data, params)
    return WOTSPublicKey(chains=chains, pub_seed=pub_seed, address=address, params=params)

def signature_to_bytes(sig: WOTSSignature) -> bytes:
    return _body(sig.chains, sig.pub_seed, sig.address)

def signature_from_bytes(data: bytes, params: WOTSParams) -> WOTSSignature:
    chains, pub_seed, address = _split_body(data, params)
    return WOTSSignature(chains=chains, pub_seed=pub_seed, address=address, params=params)

def encode_public_key(pk: WOTSPublicKey) -> bytes:
    return _header(pk.params) + public_key_to_bytes(pk)

def decode_public_key(data: bytes) -> WOTSPublicKey:
    chains, pub_seed, address, params = _decode(data)
    return WOTSPublicKey(chains=chains, pub_seed=pub_seed, address=address, params=params)

def encode_signature(sig: WOTSSignature) -> bytes:
    return _header(sig.params) + signature_to_bytes(sig)

def decode_signature(data: bytes) -> WOTSSignature:
    chains, pub_seed, address, params = _decode(data)
    return WOTSSignature(chains=chains, pub_seed=pub_seed, address=address, params=params)
