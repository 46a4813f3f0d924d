import itertools
import logging

import pytest

from duoqian.address import derive
from duoqian.errors import ErrorKind, InvalidThreshold, LengthMismatch, NoPermutationMatches, TooManyKeys
from duoqian.keygen import generate_public_key
from duoqian.keys import Scheme
from duoqian.order import DEFAULT_MAX_KEYS, find_order, max_keys_from_env, order_pks

from conftest import ED25519_ADDRESS, MULTISIG_ADDRESS


@pytest.mark.parametrize("perm", list(itertools.permutations(range(3))))
def test_recovers_original_order(three_keys, perm):
    shuffled = [three_keys[i] for i in perm]
    assert order_pks(MULTISIG_ADDRESS, shuffled, [1, 1, 1], 2) == three_keys


def test_already_ordered_returns_identity(three_keys):
    assert order_pks(MULTISIG_ADDRESS, three_keys, [1, 1, 1], 2) == three_keys


def test_no_match(three_keys):
    with pytest.raises(NoPermutationMatches) as e:
        order_pks(ED25519_ADDRESS, three_keys, [1, 1, 1], 2)
    assert e.value.kind == ErrorKind.NO_PERMUTATION_MATCHES


def test_find_order_returns_none(three_keys):
    assert find_order(ED25519_ADDRESS, three_keys, [1, 1, 1], 2) is None


def test_weights_stay_in_place():
    pks = [generate_public_key(Scheme.ED25519) for _ in range(3)]
    weights = [3, 1, 1]
    target = derive([pks[2], pks[0], pks[1]], weights, 3)
    got = order_pks(target, pks, weights, 3)
    assert got == [pks[2], pks[0], pks[1]]
    assert derive(got, weights, 3) == target


def test_random_keys_roundtrip():
    pks = [
        generate_public_key(Scheme.ED25519),
        generate_public_key(Scheme.SECP256K1),
        generate_public_key(Scheme.SECP256R1),
        generate_public_key(Scheme.SECP256K1),
    ]
    weights = [1, 2, 3, 4]
    target = derive(pks, weights, 5)
    got = order_pks(target, list(reversed(pks)), weights, 5)
    assert derive(got, weights, 5) == target


def test_validation_errors_raise_before_search(three_keys):
    with pytest.raises(LengthMismatch):
        find_order(MULTISIG_ADDRESS, three_keys, [1, 1], 2)
    with pytest.raises(InvalidThreshold):
        find_order(MULTISIG_ADDRESS, three_keys, [1, 1, 1], 0)


def test_max_keys_argument(three_keys):
    with pytest.raises(TooManyKeys):
        order_pks(MULTISIG_ADDRESS, three_keys, [1, 1, 1], 2, max_keys=2)


def test_max_keys_env(three_keys, monkeypatch):
    assert max_keys_from_env() == DEFAULT_MAX_KEYS
    monkeypatch.setenv("DUOQIAN_MAX_KEYS", "2")
    assert max_keys_from_env() == 2
    with pytest.raises(TooManyKeys):
        order_pks(MULTISIG_ADDRESS, three_keys, [1, 1, 1], 2)
    assert order_pks(MULTISIG_ADDRESS, three_keys, [1, 1, 1], 2, max_keys=3) == three_keys


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_max_keys_env_invalid(monkeypatch, raw):
    monkeypatch.setenv("DUOQIAN_MAX_KEYS", raw)
    with pytest.raises(ValueError):
        max_keys_from_env()


def test_logs_attempts(three_keys, caplog):
    with caplog.at_level(logging.DEBUG, logger="duoqian.order"):
        order_pks(MULTISIG_ADDRESS, [three_keys[1], three_keys[0], three_keys[2]], [1, 1, 1], 2)
    assert "after 2 orderings" in caplog.text


@pytest.mark.parametrize("limit", [0, -1])
def test_max_keys_argument_must_be_positive(three_keys, limit):
    with pytest.raises(ValueError, match="max_keys must be >= 1"):
        find_order(MULTISIG_ADDRESS, three_keys, [1, 1, 1], 2, max_keys=limit)
