from datetime import timedelta

from jose import jwt

from taskboard.config import SECRET_KEY
from taskboard.security import (
    ALGORITHM,
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_is_salted_and_verifiable():
    first = get_password_hash("secret1")
    second = get_password_hash("secret1")

    assert first != "secret1"
    assert first != second
    assert verify_password("secret1", first)
    assert not verify_password("wrong", first)


def test_verify_password_rejects_non_bcrypt_value():
    assert verify_password("secret1", "plain-text") is False


def test_token_carries_subject_and_email():
    token = create_access_token("user-1", "a@x.com")

    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    assert payload["sub"] == "user-1"
    assert payload["email"] == "a@x.com"
    assert "exp" in payload

    data = decode_access_token(token)
    assert data.sub == "user-1"
    assert data.email == "a@x.com"


def test_expired_token_is_rejected():
    token = create_access_token("user-1", "a@x.com", expires_delta=timedelta(minutes=-5))
    assert decode_access_token(token) is None


def test_tampered_token_is_rejected():
    token = jwt.encode({"sub": "user-1"}, "another-secret", algorithm=ALGORITHM)
    assert decode_access_token(token) is None
    assert decode_access_token("not-a-token") is None


def test_token_without_subject_is_rejected():
    token = jwt.encode({"email": "a@x.com"}, SECRET_KEY, algorithm=ALGORITHM)
    assert decode_access_token(token) is None
