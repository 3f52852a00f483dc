# 관리자 서비스 레이어
# - 게임 기록 목록 (페이지네이션), 사용자 목록/생성/수정/삭제
# - 저장소(AccountStore, GameStore)는 생성자로 주입받습니다. 프로세스 수명주기는 앱(main.py)이 관리합니다.

import asyncio
import math
import re
from typing import List, Optional

from fastapi import Depends

from ..core.exceptions import ForbiddenError, ValidationError
from ..repositories.account_store import AccountStore, missing_required_fields
from ..repositories.game_store import GameStore
from ..schemas.game_schema import GamePage, Pagination
from ..schemas.user_schema import UserPublic

CREDENTIAL_FIELDS = ("password", "hashed_password")
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def parse_positive_int(value: Optional[str], default: int) -> int:
    """쿼리 파라미터를 정수로 변환합니다.

    앞쪽의 정수 부분만 읽습니다 ("2.5" -> 2, "12abc" -> 12).
    값이 없거나 숫자로 시작하지 않거나 1보다 작으면 오류 대신 기본값을 사용합니다.
    """
    match = _LEADING_INT.match(value) if isinstance(value, str) else None
    if match is None:
        return default
    number = int(match.group())
    return number if number > 0 else default


def strip_credentials(fields: dict) -> dict:
    return {name: value for name, value in fields.items() if name not in CREDENTIAL_FIELDS}


class AdminService:
    def __init__(self, accounts: AccountStore, games: GameStore):
        self.accounts = accounts
        self.games = games

    async def list_games(self, page: int, limit: int) -> GamePage:
        skip = (page - 1) * limit
        # 페이지 조회와 전체 개수는 서로 독립적이므로 동시에 실행 (둘 중 하나라도 실패하면 전체 실패)
        games, total = await asyncio.gather(
            self.games.find_page(skip, limit),
            self.games.count(),
        )
        return GamePage(
            games=games,
            pagination=Pagination(total=total, page=page, pages=math.ceil(total / limit), limit=limit),
        )

    async def list_users(self) -> List[UserPublic]:
        return await self.accounts.list_all()

    async def create_user(self, fields: dict) -> UserPublic:
        missing = missing_required_fields(fields)
        if missing:
            raise ValidationError("All required fields must be provided", fields=missing)
        user = await self.accounts.create(fields)
        # 저장소가 무엇을 돌려주든 응답에는 비밀번호 관련 필드를 싣지 않습니다.
        return UserPublic.model_validate(strip_credentials(user.model_dump()))

    async def update_user(self, user_id: str, fields: dict) -> UserPublic:
        return await self.accounts.update_by_id(user_id, strip_credentials(fields))

    async def delete_user(self, acting_user_id: str, target_id: str) -> None:
        if str(acting_user_id) == str(target_id):
            raise ForbiddenError("Admins cannot delete their own account")
        await self.accounts.delete_by_id(target_id)


def get_admin_service(
    accounts: AccountStore = Depends(AccountStore),
    games: GameStore = Depends(GameStore),
) -> AdminService:
    return AdminService(accounts, games)
