from __future__ import annotations

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from duoqian.keys import Scheme

_CURVES = {
    Scheme.SECP256K1: ec.SECP256K1,
    Scheme.SECP256R1: ec.SECP256R1,
}


def generate_public_key(scheme: Scheme) -> bytes:
    """
    随机生成一个带 flag 的公钥: flag + 原始公钥
    ed25519 为 32 字节原始公钥，secp256k1/r1 为 33 字节压缩点。私钥直接丢弃。
    """
    if scheme == Scheme.ED25519:
        raw = ed25519.Ed25519PrivateKey.generate().public_key().public_bytes_raw()
    elif scheme in _CURVES:
        priv = ec.generate_private_key(_CURVES[scheme]())
        raw = priv.public_key().public_bytes(
            serialization.Encoding.X962,
            serialization.PublicFormat.CompressedPoint,
        )
    else:
        raise ValueError(f"cannot generate keys for scheme {scheme!r}")
    return bytes([scheme]) + raw
