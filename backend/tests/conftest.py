# 테스트 공통 설정
# - JWT 비밀키는 설정 모듈을 import하기 전에 환경변수로 넣어둡니다.
# - MongoDB 없이 돌 수 있도록 Beanie 저장소와 같은 async 인터페이스를 가진 메모리 저장소를 제공합니다.

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-points-admin-tests")

from datetime import datetime, timedelta
from typing import List

import pytest
from beanie import PydanticObjectId

from points_admin.core.exceptions import ConflictError, NotFoundError, ValidationError
from points_admin.core.security import get_password_hash, verify_password
from points_admin.repositories.account_store import (
    missing_required_fields,
    mutable_changes,
    to_object_id,
)
from points_admin.schemas.game_schema import GameEntry
from points_admin.schemas.user_schema import UserPublic, UserSummary


class InMemoryAccountStore:
    def __init__(self):
        self.users = {}

    def _public(self, record: dict) -> UserPublic:
        return UserPublic.model_validate({k: v for k, v in record.items() if k != "hashed_password"})

    def _get(self, user_id) -> dict:
        record = self.users.get(to_object_id(user_id))
        if record is None:
            raise NotFoundError("User", user_id)
        return record

    async def create(self, fields: dict) -> UserPublic:
        missing = missing_required_fields(fields)
        if missing:
            raise ValidationError("Missing required fields", fields=missing)
        if any(u["email"] == fields["email"] for u in self.users.values()):
            raise ConflictError("email", fields["email"])
        record = {
            "id": PydanticObjectId(),
            "first_name": fields["first_name"],
            "last_name": fields["last_name"],
            "email": fields["email"],
            "phone": fields["phone"],
            "hashed_password": get_password_hash(fields["password"]),
            "role": fields.get("role") or "user",
            "points": 0,
            "bio": fields.get("bio"),
            "created_at": datetime.utcnow(),
        }
        self.users[record["id"]] = record
        return self._public(record)

    async def find_by_id(self, user_id: str) -> UserPublic:
        return self._public(self._get(user_id))

    async def find_by_email(self, email: str) -> UserPublic:
        for record in self.users.values():
            if record["email"] == email:
                return self._public(record)
        raise NotFoundError("User", email)

    async def list_all(self) -> List[UserPublic]:
        return [self._public(r) for r in self.users.values()]

    async def update_by_id(self, user_id: str, fields: dict) -> UserPublic:
        record = self._get(user_id)
        changes = mutable_changes(fields)
        email = changes.get("email")
        if email and any(u["email"] == email and u is not record for u in self.users.values()):
            raise ConflictError("email", email)
        record.update(changes)
        return self._public(record)

    async def delete_by_id(self, user_id: str) -> None:
        record = self._get(user_id)
        del self.users[record["id"]]

    async def verify_credential(self, user_id: str, candidate: str) -> bool:
        record = self.users.get(to_object_id(user_id))
        if record is None:
            return False
        return verify_password(candidate, record["hashed_password"])


class InMemoryGameStore:
    def __init__(self, accounts: InMemoryAccountStore):
        self.accounts = accounts
        self.games = []

    def add(self, user_id=None, number=1, result="win", points_change=10, balance_after=10, created_at=None):
        game = {
            "id": PydanticObjectId(),
            "user_id": user_id,
            "number": number,
            "result": result,
            "points_change": points_change,
            "balance_after": balance_after,
            "created_at": created_at or datetime.utcnow(),
        }
        self.games.append(game)
        return game

    async def find_page(self, skip: int, limit: int) -> List[GameEntry]:
        ordered = sorted(self.games, key=lambda g: g["created_at"], reverse=True)
        entries = []
        for g in ordered[skip:skip + limit]:
            owner = self.accounts.users.get(g["user_id"]) if g["user_id"] is not None else None
            entries.append(GameEntry(
                id=g["id"],
                user=UserSummary(id=owner["id"], first_name=owner["first_name"], last_name=owner["last_name"]) if owner else None,
                number=g["number"],
                result=g["result"],
                points_change=g["points_change"],
                new_balance=g["balance_after"],
                created_at=g["created_at"],
            ))
        return entries

    async def count(self) -> int:
        return len(self.games)


def user_fields(**overrides) -> dict:
    fields = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "phone": "0102345678",
        "password": "S3cure!pass",
    }
    fields.update(overrides)
    return fields


def seed_games(store: InMemoryGameStore, count: int, user_id=None) -> list:
    start = datetime(2024, 1, 1)
    return [
        store.add(user_id=user_id, number=i + 1, created_at=start + timedelta(minutes=i))
        for i in range(count)
    ]


@pytest.fixture()
def accounts():
    return InMemoryAccountStore()


@pytest.fixture()
def games(accounts):
    return InMemoryGameStore(accounts)
