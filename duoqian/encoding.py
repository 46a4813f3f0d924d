from __future__ import annotations

from typing import Sequence

from duoqian.keys import Scheme


def encode_multisig(pks: Sequence[bytes], weights: Sequence[int], threshold: int) -> bytes:
    """
    拼接: flag(0x03) + 阈值(2字节, 小端) + 按传入顺序的 (公钥 + 权重(1字节))

    公钥不加长度前缀，边界依赖每种 scheme 的固定长度。
    不做校验，调用方负责 (见 address.derive)。
    """
    payload = bytearray([Scheme.MULTISIG])
    payload += threshold.to_bytes(2, "little")
    for pk, weight in zip(pks, weights):
        payload += pk
        payload += weight.to_bytes(1, "little")
    return bytes(payload)
