import pytest

ED25519_KEY = bytes([
    0, 13, 125, 171, 53, 140, 141, 173, 170, 78, 250, 0, 73, 167, 91, 7, 67,
    101, 85, 177, 10, 54, 130, 25, 187, 104, 15, 112, 87, 19, 73, 215, 117,
])
SECP256K1_KEY = bytes([
    1, 2, 14, 23, 205, 89, 57, 228, 107, 25, 102, 65, 150, 140, 215, 89, 145,
    11, 162, 87, 126, 39, 250, 115, 253, 227, 135, 109, 185, 190, 197, 188, 235,
    43,
])
SECP256R1_KEY = bytes([
    2, 3, 71, 251, 175, 35, 240, 56, 171, 196, 195, 8, 162, 113, 17, 122, 42,
    76, 255, 174, 221, 188, 95, 248, 28, 117, 23, 188, 108, 116, 167, 237, 180,
    48,
])

ED25519_ADDRESS = bytes.fromhex("73a6b3c33e2d63383de5c6786cbaca231ff789f4c853af6d54cb883d8780adc0")
MULTISIG_ADDRESS = bytes.fromhex("1c4dac7fb4c01a0c608db993711c451ad655a38b7f0a9571ff099f70090263a8")


@pytest.fixture
def three_keys():
    return [ED25519_KEY, SECP256K1_KEY, SECP256R1_KEY]


@pytest.fixture(autouse=True)
def _no_max_keys_env(monkeypatch):
    monkeypatch.delenv("DUOQIAN_MAX_KEYS", raising=False)
