"""Content-addressed identifier for the inputs of a verification call.

The identifier is a CIDv0-style string: base58btc over a sha2-256 multihash
(0x12 0x20 <digest>), so it always starts with "Qm" and is 46 characters long.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict

from xc3_verifier.models.domain import DocumentQualityProfile, ProjectMetadata

_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_SHA2_256_CODE = 0x12
_SHA2_256_LENGTH = 0x20


def canonical_payload(
    metadata: ProjectMetadata, profiles: list[DocumentQualityProfile]
) -> bytes:
    payload = {
        "project": asdict(metadata),
        "documents": [asdict(p) for p in profiles],
    }
    return json.dumps(
        payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def base58_encode(data: bytes) -> str:
    """Bitcoin-alphabet base58, one leading "1" per leading zero byte.

    Encode-only and kept local on purpose: the hash never needs decoding,
    and this is the only base58 use in the package.
    """
    num = int.from_bytes(data, "big")
    encoded = ""
    while num > 0:
        num, rem = divmod(num, 58)
        encoded = _BASE58_ALPHABET[rem] + encoded
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    return "1" * leading_zeros + encoded


def artifacts_hash(
    metadata: ProjectMetadata, profiles: list[DocumentQualityProfile]
) -> str:
    digest = hashlib.sha256(canonical_payload(metadata, profiles)).digest()
    multihash = bytes([_SHA2_256_CODE, _SHA2_256_LENGTH]) + digest
    return base58_encode(multihash)
