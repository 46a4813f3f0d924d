"""
单公钥 → 地址
规则：
公钥 = flag(1 byte) + 原始公钥
Address = blake2b-256(公钥)，不再额外加前缀
"""

from __future__ import annotations

import hashlib
from enum import IntEnum

from duoqian.errors import InvalidKeyFlag, InvalidKeyLength

ADDRESS_LENGTH = 32


class Scheme(IntEnum):
    ED25519 = 0x00
    SECP256K1 = 0x01
    SECP256R1 = 0x02
    MULTISIG = 0x03


# flag 字节计入长度
KEY_LENGTHS = {
    Scheme.ED25519: 33,
    Scheme.SECP256K1: 34,
    Scheme.SECP256R1: 34,
}

SCHEME_BY_NAME = {
    "ed25519": Scheme.ED25519,
    "secp256k1": Scheme.SECP256K1,
    "secp256r1": Scheme.SECP256R1,
}


def blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=ADDRESS_LENGTH).digest()


def address_from_key(pk: bytes, expected_length: int, expected_flag: int) -> bytes:
    if len(pk) != expected_length:
        raise InvalidKeyLength(f"key must be {expected_length} bytes, got {len(pk)}")
    if pk[0] != expected_flag:
        raise InvalidKeyFlag(f"key flag must be 0x{expected_flag:02x}, got 0x{pk[0]:02x}")
    return blake2b_256(bytes(pk))


def key_to_address(pk: bytes, scheme: Scheme) -> bytes:
    return address_from_key(pk, KEY_LENGTHS[scheme], scheme)


def ed25519_key_to_address(pk: bytes) -> bytes:
    return key_to_address(pk, Scheme.ED25519)


def secp256k1_key_to_address(pk: bytes) -> bytes:
    return key_to_address(pk, Scheme.SECP256K1)


def secp256r1_key_to_address(pk: bytes) -> bytes:
    return key_to_address(pk, Scheme.SECP256R1)


def address_to_hex(address: bytes) -> str:
    return "0x" + bytes(address).hex()


def parse_address(raw: str) -> bytes:
    txt = raw.strip().lower()
    if txt.startswith("0x"):
        txt = txt[2:]
    try:
        address = bytes.fromhex(txt)
    except ValueError as e:
        raise ValueError(f"address is not hex: {raw}") from e
    if len(address) != ADDRESS_LENGTH:
        raise ValueError(f"address must be {ADDRESS_LENGTH} bytes, got {len(address)}")
    return address
