# 보안 유닛 테스트 (DB 의존성 없음)
import asyncio

import jwt
import pytest
from fastapi import HTTPException

from points_admin.core.config import settings
from points_admin.core.security import (
    Principal,
    create_access_token,
    create_token,
    get_current_principal,
    get_password_hash,
    require_admin,
    verify_password,
)
from datetime import timedelta

def test_password_hash_and_verify():
    pw = "S3cure!"
    hashed = get_password_hash(pw)
    assert hashed != pw
    assert verify_password(pw, hashed)
    assert not verify_password("wrong", hashed)

def test_password_hash_uses_cost_factor_12():
    hashed = get_password_hash("S3cure!")
    assert hashed.startswith("$2b$12$")

def test_password_hash_is_salted():
    assert get_password_hash("same") != get_password_hash("same")

def test_create_access_token():
    token = create_access_token("user123", "admin")
    decoded = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert decoded["sub"] == "user123"
    assert decoded["role"] == "admin"
    assert decoded["type"] == "access"

def test_current_principal_from_token():
    token = create_access_token("user123", "user")
    principal = asyncio.run(get_current_principal(token))
    assert principal == Principal(id="user123", role="user")

def test_current_principal_rejects_bad_tokens():
    expired = create_token({"sub": "u1", "role": "admin", "type": "access"}, timedelta(minutes=-5))
    wrong_type = create_token({"sub": "u1", "role": "admin", "type": "refresh"}, timedelta(minutes=5))
    for token in (expired, wrong_type, "not-a-jwt"):
        with pytest.raises(HTTPException) as exc:
            asyncio.run(get_current_principal(token))
        assert exc.value.status_code == 401

def test_require_admin():
    admin = Principal(id="a1", role="admin")
    assert asyncio.run(require_admin(admin)) is admin
    with pytest.raises(HTTPException) as exc:
        asyncio.run(require_admin(Principal(id="u1", role="user")))
    assert exc.value.status_code == 403
