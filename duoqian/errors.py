"""多签地址派生的错误类型。"""

from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    LENGTH_MISMATCH = 0
    INVALID_THRESHOLD = 1
    INVALID_KEY_LENGTH = 2
    INVALID_KEY_FLAG = 3
    NO_PERMUTATION_MATCHES = 4
    INVALID_WEIGHT = 5
    TOO_MANY_KEYS = 6


class MultisigError(ValueError):
    kind: ErrorKind

    @property
    def code(self) -> int:
        return int(self.kind)


class LengthMismatch(MultisigError):
    kind = ErrorKind.LENGTH_MISMATCH


class InvalidThreshold(MultisigError):
    kind = ErrorKind.INVALID_THRESHOLD


class InvalidKeyLength(MultisigError):
    kind = ErrorKind.INVALID_KEY_LENGTH


class InvalidKeyFlag(MultisigError):
    kind = ErrorKind.INVALID_KEY_FLAG


class NoPermutationMatches(MultisigError):
    kind = ErrorKind.NO_PERMUTATION_MATCHES


class InvalidWeight(MultisigError):
    kind = ErrorKind.INVALID_WEIGHT


class TooManyKeys(MultisigError):
    kind = ErrorKind.TOO_MANY_KEYS
