"""
多签地址派生

Address = blake2b-256(0x03 + threshold(u16 LE) + pk_0 + w_0 + pk_1 + w_1 ...)
公钥顺序参与哈希，同一组公钥换顺序得到不同地址。
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from duoqian.encoding import encode_multisig
from duoqian.errors import InvalidThreshold, InvalidWeight, LengthMismatch
from duoqian.keys import address_to_hex, blake2b_256

logger = logging.getLogger(__name__)

MAX_WEIGHT = 0xFF
MAX_THRESHOLD = 0xFFFF


@dataclass(frozen=True)
class MultisigAddressEvent:
    pks: tuple[bytes, ...]
    weights: tuple[int, ...]
    threshold: int
    multisig_address: bytes

    def to_dict(self) -> dict:
        return {
            "pks": ["0x" + pk.hex() for pk in self.pks],
            "weights": list(self.weights),
            "threshold": self.threshold,
            "multisig_address": address_to_hex(self.multisig_address),
        }


class EventSink(Protocol):
    def emit(self, event: MultisigAddressEvent) -> None: ...


@dataclass
class EventLog:
    events: list[MultisigAddressEvent] = field(default_factory=list)

    def emit(self, event: MultisigAddressEvent) -> None:
        self.events.append(event)


@dataclass(frozen=True)
class TxContext:
    """调用方身份，由宿主环境提供。"""

    sender: bytes


def validate(pks: Sequence[bytes], weights: Sequence[int], threshold: int) -> None:
    if len(pks) != len(weights):
        raise LengthMismatch(f"{len(pks)} keys but {len(weights)} weights")
    for w in weights:
        if not 0 <= w <= MAX_WEIGHT:
            raise InvalidWeight(f"weight {w} out of range 0..{MAX_WEIGHT}")
    # 权重和不截断到 u16，避免溢出后放过过大的阈值
    total = sum(weights)
    if threshold <= 0 or threshold > MAX_THRESHOLD or threshold > total:
        raise InvalidThreshold(f"threshold {threshold} must be in 1..{min(total, MAX_THRESHOLD)}")


def derive(pks: Sequence[bytes], weights: Sequence[int], threshold: int) -> bytes:
    validate(pks, weights, threshold)
    return blake2b_256(encode_multisig(pks, weights, threshold))


def derive_multisig_address_quiet(pks: Sequence[bytes], weights: Sequence[int], threshold: int) -> bytes:
    return derive(pks, weights, threshold)


def derive_multisig_address(
    pks: Sequence[bytes],
    weights: Sequence[int],
    threshold: int,
    sink: EventSink | None = None,
) -> bytes:
    """派生地址并发出一次 MultisigAddressEvent；没有 sink 时写入日志。"""
    address = derive(pks, weights, threshold)
    event = MultisigAddressEvent(
        pks=tuple(bytes(pk) for pk in pks),
        weights=tuple(weights),
        threshold=threshold,
        multisig_address=address,
    )
    if sink is None:
        logger.info("MultisigAddressEvent %s", json.dumps(event.to_dict()), extra={"event": event})
    else:
        sink.emit(event)
    return address


def check_multisig_address_eq(
    pks: Sequence[bytes], weights: Sequence[int], threshold: int, expected: bytes
) -> bool:
    return derive(pks, weights, threshold) == bytes(expected)


def check_if_sender_is_multisig_address(
    pks: Sequence[bytes], weights: Sequence[int], threshold: int, ctx: TxContext
) -> bool:
    return check_multisig_address_eq(pks, weights, threshold, ctx.sender)
