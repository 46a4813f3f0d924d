"""
已知多签地址，找回公钥顺序

只对公钥做排列，权重和阈值保持原位置不动，
按 permutations 的顺序逐个派生，第一个命中即返回。
复杂度 O(n! * n)，只适合小 n。
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

from duoqian.address import derive, validate
from duoqian.errors import NoPermutationMatches, TooManyKeys
from duoqian.keys import address_to_hex
from duoqian.permutations import iter_permutations

logger = logging.getLogger(__name__)

DEFAULT_MAX_KEYS = 10
MAX_KEYS_ENV = "DUOQIAN_MAX_KEYS"


def max_keys_from_env() -> int:
    raw = os.environ.get(MAX_KEYS_ENV, "").strip()
    if raw == "":
        return DEFAULT_MAX_KEYS
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{MAX_KEYS_ENV} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ValueError(f"{MAX_KEYS_ENV} must be >= 1, got {value}")
    return value


def find_order(
    expected_address: bytes,
    pks: Sequence[bytes],
    weights: Sequence[int],
    threshold: int,
    max_keys: int | None = None,
) -> list[bytes] | None:
    """返回命中的公钥顺序；全部排列都不匹配时返回 None。参数不合法仍然抛异常。"""
    if max_keys is None:
        limit = max_keys_from_env()
    elif max_keys < 1:
        raise ValueError(f"max_keys must be >= 1, got {max_keys}")
    else:
        limit = max_keys
    if len(pks) > limit:
        raise TooManyKeys(f"{len(pks)} keys exceeds limit {limit}")
    # 排列不改变长度和权重，先校验一次
    validate(pks, weights, threshold)

    expected = bytes(expected_address)
    tried = 0
    for candidate in iter_permutations(pks):
        tried += 1
        if derive(candidate, weights, threshold) == expected:
            logger.debug("matched %s after %d orderings", address_to_hex(expected), tried)
            return candidate
    logger.debug("no ordering of %d keys matches %s (%d tried)", len(pks), address_to_hex(expected), tried)
    return None


def order_pks(
    expected_address: bytes,
    pks: Sequence[bytes],
    weights: Sequence[int],
    threshold: int,
    max_keys: int | None = None,
) -> list[bytes]:
    ordered = find_order(expected_address, pks, weights, threshold, max_keys=max_keys)
    if ordered is None:
        raise NoPermutationMatches(f"no ordering of {len(pks)} keys derives {address_to_hex(expected_address)}")
    return ordered
