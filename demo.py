# demo.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from params import PARAMETER_SETS, DEFAULT_PARAMS, WOTSParams, get_params
from hashfuncs import core_hash
from wots import WOTSSignature, wots_keygen, wots_verify
from serialize import encode_public_key, encode_signature, decode_signature


def _digest(msg: bytes, params: WOTSParams) -> bytes:
    # WOTS+ signs an n-byte digest from the same hash family as the key.
    return core_hash(msg, params)


def _corrupt_first_chain(sig: WOTSSignature) -> WOTSSignature:
    first = sig.chains[0]
    chains = [bytes([first[0] ^ 0x01]) + first[1:]] + sig.chains[1:]
    return WOTSSignature(chains=chains, pub_seed=sig.pub_seed, address=sig.address, params=sig.params)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="WOTS+ one-time signature demo")
    parser.add_argument("--params", default=DEFAULT_PARAMS.name, choices=sorted(PARAMETER_SETS),
                        help="parameter set (default: %(default)s)")
    parser.add_argument("--message", default="demo WOTS+.", help="message to sign")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(message)s")

    params = get_params(args.params)
    sk, pub_seed, pk = wots_keygen(params)
    msg = _digest(args.message.encode("utf-8"), params)

    sig = sk.sign(pub_seed, msg)
    sig_bytes = encode_signature(sig)
    print(f"params: {params.name} (n={params.n}, w={params.w}, len={params.length})")
    print(f"public key: {len(encode_public_key(pk))} bytes, signature: {len(sig_bytes)} bytes")

    # Test 1: sign/verify OK, after a trip through the wire format.
    ok = wots_verify(decode_signature(sig_bytes), msg, pk)
    print("verify (OK):", ok)

    # Test 2: wrong message.
    wrong = _digest(b"different message", params)
    neg_msg = wots_verify(sig, wrong, pk)
    print("verify wrong msg (NEGATIVE):", neg_msg)

    # Test 3: one flipped bit in the first chain value.
    neg_sig = wots_verify(_corrupt_first_chain(sig), msg, pk)
    print("verify corrupted sig (NEGATIVE):", neg_sig)

    return 0 if ok and not neg_msg and not neg_sig else 1


if __name__ == "__main__":
    raise SystemExit(main())
