"""Weighted multisig address derivation and key-order recovery."""

from duoqian.address import (
    EventLog,
    MultisigAddressEvent,
    TxContext,
    check_if_sender_is_multisig_address,
    check_multisig_address_eq,
    derive,
    derive_multisig_address,
    derive_multisig_address_quiet,
)
from duoqian.encoding import encode_multisig
from duoqian.errors import (
    ErrorKind,
    InvalidKeyFlag,
    InvalidKeyLength,
    InvalidThreshold,
    InvalidWeight,
    LengthMismatch,
    MultisigError,
    NoPermutationMatches,
    TooManyKeys,
)
from duoqian.keys import (
    Scheme,
    address_from_key,
    address_to_hex,
    ed25519_key_to_address,
    parse_address,
    secp256k1_key_to_address,
    secp256r1_key_to_address,
)
from duoqian.order import find_order, order_pks
from duoqian.permutations import iter_permutations, permutations

__version__ = "0.1.0"
