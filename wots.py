# wots.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Tuple
import hmac
import logging
import os

from params import WOTSParams, DEFAULT_PARAMS
from address import Address
from utils import base_w, to_bytes, xor_bytes
from hashfuncs import PRF, F

def new_seed(params: WOTSParams = DEFAULT_PARAMS, rng: Callable[[int], bytes] = os.urandom) -> bytes:
    """n bytes of secret or public randomness drawn from rng."""
    seed = rng(params.n)
    if len(seed) != params.n:
        raise ValueError("rng returned the wrong number of bytes")
    return seed

def expand_secret(seed: bytes, params: WOTSParams) -> List[bytes]:
    """
    RFC 8391, Section 3.1.7: sk[i] = PRF(S, toByte(i,32)).
    seed is the secret seed for one specific WOTS+ key pair.
    """
    if len(seed) != params.n:
        raise ValueError("seed must be n bytes")
    return [PRF(seed, to_bytes(i, 32), params) for i in range(params.length)]

def chain(X: bytes, start: int, steps: int, SEED: bytes, adrs: Address, params: WOTSParams) -> bytes:
    """
    Walk one Winternitz chain (RFC 8391, Algorithm 2, in iterative form).
    X is the start-th value of the chain, the result the (start+steps)-th.
    Steps whose index reaches w are dropped without error.
    Only the hash and keyAndMask words of adrs are written.
    Algoritmo 2 (versione iterativa): chain
    Input: valore X, posizione iniziale start, passi steps, seed SEED, indirizzo ADRS
    Output: valore della chain dopo steps applicazioni di F

    tmp = X;
    for (i = start; i < start + steps && i < w; i++) {
      ADRS.setHashAddress(i);
      ADRS.setKeyAndMask(0);
      KEY = PRF(SEED, ADRS);
      ADRS.setKeyAndMask(1);
      BM = PRF(SEED, ADRS);
      tmp = F(KEY, tmp XOR BM);
    }
    return tmp;
    """
    tmp = X
    for i in range(start, start + steps):
        if i >= params.w:
            break
        adrs.set_hash(i)
        adrs.set_keymask(0)
        KEY = PRF(SEED, adrs.to_bytes(), params)
        adrs.set_keymask(1)
        BM = PRF(SEED, adrs.to_bytes(), params)
        tmp = F(KEY, xor_bytes(tmp, BM), params)
    return tmp

def wots_msg_digits(M: bytes, params: WOTSParams) -> List[int]:
    """
    RFC 8391, Algorithms 5/6: base_w(M, len_1) + checksum base_w(..., len_2).
    M must be n bytes.
    """
    if len(M) != params.n:
        raise ValueError("WOTS expects n-byte message digest")
    w = params.w
    # Cifre base-w del digest (len_1), poi il checksum (len_2).
    msg = base_w(M, w, params.len_1)

    csum = 0
    for digit in msg:
        csum += (w - 1) - digit

    # Left-align the checksum so its unused bits are the low bits of the last byte.
    csum <<= 8 - ((params.len_2 * params.lg_w) % 8)
    csum_bytes = to_bytes(csum, params.len_2_bytes)
    return msg + base_w(csum_bytes, w, params.len_2)

def _chain_at(i: int, X: bytes, start: int, steps: int, SEED: bytes,
              adrs: Address, params: WOTSParams) -> bytes:
    # Each position walks on its own address copy, so positions can run in any order.
    a = adrs.copy()
    a.set_chain(i)
    return chain(X, start, steps, SEED, a, params)

def wots_gen_pk(sk: List[bytes], SEED: bytes, adrs: Address, params: WOTSParams) -> List[bytes]:
    """RFC 8391, Algorithm 4: walk every chain to its end, pk[i] = chain(sk[i], 0, w-1)."""
    if len(sk) != params.length:
        raise ValueError("sk length mismatch")
    return [_chain_at(i, sk[i], 0, params.w - 1, SEED, adrs, params)
            for i in range(params.length)]

def wots_sign(M: bytes, sk: List[bytes], SEED: bytes, adrs: Address, params: WOTSParams) -> List[bytes]:
    """RFC 8391, Algorithm 5: sig[i] = chain(sk[i], 0, msg[i]).
    Firma WOTS+: ogni chain si ferma alla cifra base-w del messaggio.
    """
    if len(sk) != params.length:
        raise ValueError("sk length mismatch")
    msg = wots_msg_digits(M, params)
    return [_chain_at(i, sk[i], 0, msg[i], SEED, adrs, params)
            for i in range(params.length)]

def wots_pk_from_sig(sig: List[bytes], M: bytes, SEED: bytes, adrs: Address, params: WOTSParams) -> List[bytes]:
    """RFC 8391, Algorithm 6: finish each chain from the signed position."""
    if len(sig) != params.length:
        raise ValueError("sig length mismatch")
    msg = wots_msg_digits(M, params)
    return [_chain_at(i, sig[i], msg[i], (params.w - 1) - msg[i], SEED, adrs, params)
            for i in range(params.length)]

def _check_chains(chains: List[bytes], params: WOTSParams) -> None:
    if len(chains) != params.length:
        raise ValueError(f"expected {params.length} chain values, got {len(chains)}")
    for c in chains:
        if len(c) != params.n:
            raise ValueError("chain value length != n")

@dataclass
class WOTSSecretKey:
    """Unexpanded one-time private key: secret seed plus the key pair's address."""
    seed: bytes = field(repr=False)
    address: Address
    params: WOTSParams = DEFAULT_PARAMS
    used: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.seed) != self.params.n:
            raise ValueError("seed must be n bytes")

    @classmethod
    def generate(cls, params: WOTSParams = DEFAULT_PARAMS,
                 rng: Callable[[int], bytes] = os.urandom) -> "WOTSSecretKey":
        return cls(seed=new_seed(params, rng), address=Address.new(rng), params=params)

    def sign(self, pub_seed: bytes, msg: bytes) -> "WOTSSignature":
        """Sign an n-byte digest. A key object signs once; a second call raises ValueError."""
        if self.used:
            raise ValueError("WOTS+: secret key already used to sign a message")
        if len(pub_seed) != self.params.n:
            raise ValueError("pub_seed must be n bytes")
        sk = expand_secret(self.seed, self.params)
        chains = wots_sign(msg, sk, pub_seed, self.address, self.params)
        # Mark only after a successful signature so a rejected msg does not burn the key.
        self.used = True
        logging.debug("WOTS+ signed one message with %s", self.params.name)
        return WOTSSignature(chains=chains, pub_seed=pub_seed,
                             address=self.address.copy(), params=self.params)

@dataclass
class WOTSSignature:
    chains: List[bytes]
    pub_seed: bytes
    address: Address
    params: WOTSParams = DEFAULT_PARAMS

    def __post_init__(self) -> None:
        _check_chains(self.chains, self.params)
        if len(self.pub_seed) != self.params.n:
            raise ValueError("pub_seed must be n bytes")

    def to_bytes(self) -> bytes:
        return b"".join(self.chains)

@dataclass
class WOTSPublicKey:
    chains: List[bytes]
    pub_seed: bytes
    address: Address
    params: WOTSParams = DEFAULT_PARAMS

    def __post_init__(self) -> None:
        _check_chains(self.chains, self.params)
        if len(self.pub_seed) != self.params.n:
            raise ValueError("pub_seed must be n bytes")

    def to_bytes(self) -> bytes:
        return b"".join(self.chains)

    @classmethod
    def from_secret_key(cls, sk: WOTSSecretKey, pub_seed: bytes) -> "WOTSPublicKey":
        """
        WOTS+ public key generation: expand the secret seed into len chain
        starts and walk each chain w-1 steps under pub_seed and the key's address.
        """
        params = sk.params
        if len(pub_seed) != params.n:
            raise ValueError("pub_seed must be n bytes")
        chains = wots_gen_pk(expand_secret(sk.seed, params), pub_seed, sk.address, params)
        logging.debug("WOTS+ public key generated with %s", params.name)
        return cls(chains=chains, pub_seed=pub_seed, address=sk.address.copy(), params=params)

    @classmethod
    def from_signature(cls, sig: WOTSSignature, msg: bytes) -> "WOTSPublicKey":
        """Recompute the public key a signature claims; compare it against a trusted one."""
        chains = wots_pk_from_sig(sig.chains, msg, sig.pub_seed, sig.address, sig.params)
        return cls(chains=chains, pub_seed=sig.pub_seed, address=sig.address.copy(), params=sig.params)

def wots_keygen(params: WOTSParams = DEFAULT_PARAMS,
                rng: Callable[[int], bytes] = os.urandom) -> Tuple[WOTSSecretKey, bytes, WOTSPublicKey]:
    """Fresh secret key, public seed and the matching public key."""
    sk = WOTSSecretKey.generate(params, rng)
    pub_seed = new_seed(params, rng)
    return sk, pub_seed, WOTSPublicKey.from_secret_key(sk, pub_seed)

def wots_verify(sig: WOTSSignature, msg: bytes, pk: WOTSPublicKey) -> bool:
    """
    True iff the public key reconstructed from (sig, msg) matches pk chain for chain.
    Mismatched parameter sets or a wrong-width msg verify as False, and so does a
    signature whose pub_seed or address differs from the trusted key's.
    """
    if sig.params != pk.params or len(msg) != pk.params.n:
        logging.debug("WOTS+ verify: parameter or message width mismatch")
        return False
    if sig.pub_seed != pk.pub_seed or sig.address != pk.address:
        logging.debug("WOTS+ verify: pub_seed or address mismatch")
        return False
    # Chains are always completed under the trusted pub_seed and address.
    chains = wots_pk_from_sig(sig.chains, msg, pk.pub_seed, pk.address, pk.params)
    ok = hmac.compare_digest(b"".join(chains), pk.to_bytes())
    logging.debug("WOTS+ verify: %s", "valid" if ok else "invalid")
    return ok
