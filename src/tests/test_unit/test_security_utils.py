import pytest

from security.utils import hash_password, verify_password, BCRYPT_ROUNDS


@pytest.mark.unit
def test_hash_password_is_salted():
    first = hash_password("password123")
    second = hash_password("password123")
    assert first != second
    assert verify_password("password123", first)
    assert verify_password("password123", second)


@pytest.mark.unit
def test_hash_uses_fixed_cost_factor():
    hashed = hash_password("password123")
    assert hashed.startswith("$2b$")
    assert hashed.split("$")[2] == f"{BCRYPT_ROUNDS:02d}"


@pytest.mark.unit
def test_verify_password_rejects_wrong_password():
    hashed = hash_password("password123")
    assert not verify_password("password124", hashed)
