"""Tests for RADIUS password generation."""

import string

import pytest

from guest_portal.utils.credentials import generate_radius_password


def test_default_length_is_16_hex_chars() -> None:
    password = generate_radius_password()
    assert len(password) == 16
    assert set(password) <= set(string.hexdigits.lower())


def test_custom_length() -> None:
    assert len(generate_radius_password(16)) == 32


def test_rejects_low_entropy() -> None:
    with pytest.raises(ValueError):
        generate_radius_password(4)


def test_passwords_are_not_repeated() -> None:
    passwords = {generate_radius_password() for _ in range(200)}
    assert len(passwords) == 200
