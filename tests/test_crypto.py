import string

import pytest

from lights.crypto import generate_salt, hash_password, verify_password

PASSWORD = "password"
WRONG_PASSWORD = "secret"
HEX_UPPER = set(string.digits + "ABCDEF")


def test_known_digest():
    assert hash_password("abc") == (
        "DDAF35A193617ABACC417349AE20413112E6FA4E89A97EA20A9EEEE64B55D39A"
        "2192992A274FC1A836BA3C23A3FEEBBD454D4423643CE80E2A9AC94FA54CA49F"
    )


def test_hash_is_upper_hex_of_fixed_length():
    digest = hash_password(PASSWORD)
    assert len(digest) == 128
    assert set(digest) <= HEX_UPPER


def test_hash_is_deterministic_and_distinguishes_inputs():
    assert hash_password(PASSWORD) == hash_password(PASSWORD)
    assert hash_password(PASSWORD) != hash_password(WRONG_PASSWORD)


def test_verify_accepts_right_and_rejects_wrong():
    digest = hash_password(PASSWORD)
    assert verify_password(PASSWORD, digest) is True
    assert verify_password(WRONG_PASSWORD, digest) is False


def test_salt_length_and_alphabet():
    salt = generate_salt(32)
    assert len(salt) == 64
    assert set(salt) <= HEX_UPPER


def test_salts_are_unique():
    salts = [generate_salt(32) for _ in range(5)]
    assert len(set(salts)) == 5


def test_empty_salt():
    assert generate_salt(0) == ""


def test_negative_salt_length():
    with pytest.raises(ValueError):
        generate_salt(-1)