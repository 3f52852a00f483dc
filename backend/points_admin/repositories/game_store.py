# 게임 기록 저장소 레이어 (읽기 전용)
# - 최신순 페이지 조회 + 전체 개수
# - 게임의 소유 사용자 이름은 한 번의 추가 쿼리로 채웁니다 (mongoose populate와 같은 역할)
#   사용자가 이미 삭제되었으면 user는 None이 됩니다.

from typing import Dict, List

from beanie import PydanticObjectId
from beanie.operators import In
from pymongo.errors import PyMongoError

from ..core.exceptions import StoreError
from ..models.game import Game
from ..models.user import User
from ..schemas.game_schema import GameEntry
from ..schemas.user_schema import UserSummary


class GameStore:
    async def find_page(self, skip: int, limit: int) -> List[GameEntry]:
        try:
            games = await Game.find_all().sort("-createdAt").skip(skip).limit(limit).to_list()
            owners = await self._owners({g.user_id for g in games if g.user_id is not None})
        except PyMongoError as e:
            raise StoreError("games.find_page", str(e)) from e

        return [
            GameEntry(
                id=g.id,
                user=owners.get(g.user_id) if g.user_id is not None else None,
                number=g.number,
                result=g.result,
                points_change=g.points_change,
                new_balance=g.balance_after,
                created_at=g.created_at,
            )
            for g in games
        ]

    async def count(self) -> int:
        try:
            return await Game.find_all().count()
        except PyMongoError as e:
            raise StoreError("games.count", str(e)) from e

    async def _owners(self, user_ids: set) -> Dict[PydanticObjectId, UserSummary]:
        if not user_ids:
            return {}
        summaries = await User.find(In(User.id, list(user_ids))).project(UserSummary).to_list()
        return {s.id: s for s in summaries}
