from jose import jwt

from valormind.core.auth import decode_access_token
from valormind.core.config import settings


def make_token(**claims):
    payload = {"sub": "user-123", "email": "amara@example.com", "aud": "authenticated"}
    payload.update(claims)
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def test_valid_supabase_token_is_decoded():
    token_data = decode_access_token(make_token())
    assert token_data.user_id == "user-123"
    assert token_data.email == "amara@example.com"


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"sub": "user-123", "aud": "authenticated"}, "not-the-secret", algorithm="HS256")
    assert decode_access_token(token) is None


def test_token_for_other_audience_is_rejected():
    assert decode_access_token(make_token(aud="anon")) is None


def test_malformed_token_is_rejected():
    assert decode_access_token("not-a-jwt") is None
