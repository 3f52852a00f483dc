# 계정 저장소 레이어
# - User 문서의 생성/조회/수정/삭제와 비밀번호 검증을 담당
# - 비밀번호는 저장 직전에 bcrypt(cost 12)로 해싱합니다. (스키마 훅이 아니라 create 경로에서 명시적으로 호출)
# - 저장소 밖으로는 비밀번호 해시가 없는 UserPublic만 돌려줍니다.

import asyncio
import logging
from typing import List, Optional

from beanie import PydanticObjectId
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..core.exceptions import ConflictError, NotFoundError, StoreError, ValidationError
from ..core.security import get_password_hash, verify_password
from ..models.user import User
from ..schemas.user_schema import NULLABLE_FIELDS, UserPublic

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("first_name", "last_name", "email", "phone", "password")
# 이 경로로 수정 가능한 필드. 비밀번호 변경은 별도 흐름에서만 처리합니다.
MUTABLE_FIELDS = ("first_name", "last_name", "email", "phone", "role", "points", "bio")


def missing_required_fields(fields: dict) -> List[str]:
    """값이 없거나 빈 문자열인 필수 필드 이름 목록"""
    return [name for name in REQUIRED_FIELDS if not fields.get(name)]


def mutable_changes(fields: dict) -> dict:
    """부분 수정 요청에서 수정 가능한 필드만 남깁니다.

    비밀번호 관련 키는 조용히 버려지고, bio 외의 필드에 온 None도 버려집니다 (필수 필드를 null로 덮어쓰지 않음).
    """
    return {
        name: value for name, value in fields.items()
        if name in MUTABLE_FIELDS and (value is not None or name in NULLABLE_FIELDS)
    }


def to_object_id(user_id) -> Optional[PydanticObjectId]:
    # 형식이 잘못된 id는 "존재하지 않는 사용자"로 취급합니다.
    if not PydanticObjectId.is_valid(user_id):
        return None
    return PydanticObjectId(user_id)


def to_public(user: User) -> UserPublic:
    return UserPublic(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone=user.phone,
        role=user.role,
        points=user.points,
        bio=user.bio,
        created_at=user.created_at,
    )


class AccountStore:
    async def create(self, fields: dict) -> UserPublic:
        missing = missing_required_fields(fields)
        if missing:
            raise ValidationError("Missing required fields", fields=missing)

        email = fields["email"]
        try:
            if await User.find_one(User.email == email):
                raise ConflictError("email", email)
            # bcrypt(cost 12)는 수백 ms가 걸리므로 이벤트 루프를 막지 않도록 스레드에서 실행
            hashed = await asyncio.to_thread(get_password_hash, fields["password"])
            user = User(
                first_name=fields["first_name"],
                last_name=fields["last_name"],
                email=email,
                phone=fields["phone"],
                hashed_password=hashed,
                role=fields.get("role") or "user",
                points=0,
                bio=fields.get("bio"),
            )
            await user.insert()
        except DuplicateKeyError:
            # 사전 검사 이후 동시에 같은 이메일이 들어온 경우: unique 인덱스가 최종 판정
            raise ConflictError("email", email)
        except PyMongoError as e:
            raise StoreError("users.insert", str(e)) from e

        logger.info(f"[users] created {user.id} (role={user.role})")
        return to_public(user)

    async def find_by_id(self, user_id: str) -> UserPublic:
        oid = to_object_id(user_id)
        if oid is None:
            raise NotFoundError("User", user_id)
        try:
            user = await User.find_one(User.id == oid).project(UserPublic)
        except PyMongoError as e:
            raise StoreError("users.find_by_id", str(e)) from e
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def find_by_email(self, email: str) -> UserPublic:
        try:
            user = await User.find_one(User.email == email).project(UserPublic)
        except PyMongoError as e:
            raise StoreError("users.find_by_email", str(e)) from e
        if user is None:
            raise NotFoundError("User", email)
        return user

    async def list_all(self) -> List[UserPublic]:
        # projection으로 hashed_password를 쿼리 단계에서 제외
        try:
            return await User.find_all().project(UserPublic).to_list()
        except PyMongoError as e:
            raise StoreError("users.list", str(e)) from e

    async def update_by_id(self, user_id: str, fields: dict) -> UserPublic:
        changes = mutable_changes(fields)
        oid = to_object_id(user_id)
        if oid is None:
            raise NotFoundError("User", user_id)
        try:
            user = await User.get(oid)
            if user is None:
                raise NotFoundError("User", user_id)
            if changes:
                await user.set(changes)
        except DuplicateKeyError:
            raise ConflictError("email", changes.get("email"))
        except PyMongoError as e:
            raise StoreError("users.update", str(e)) from e
        return to_public(user)

    async def delete_by_id(self, user_id: str) -> None:
        oid = to_object_id(user_id)
        if oid is None:
            raise NotFoundError("User", user_id)
        try:
            user = await User.get(oid)
            if user is None:
                raise NotFoundError("User", user_id)
            await user.delete()
        except PyMongoError as e:
            raise StoreError("users.delete", str(e)) from e
        logger.info(f"[users] deleted {user_id}")

    async def verify_credential(self, user_id: str, candidate: str) -> bool:
        oid = to_object_id(user_id)
        if oid is None:
            return False
        try:
            user = await User.get(oid)
        except PyMongoError as e:
            raise StoreError("users.verify_credential", str(e)) from e
        if user is None:
            return False
        return await asyncio.to_thread(verify_password, candidate, user.hashed_password)
