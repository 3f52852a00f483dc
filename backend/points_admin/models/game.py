# 게임 기록 모델 (읽기 전용)
# - 게임 세션 로직이 한 판이 끝날 때마다 기록하는 문서
# - 컬렉션은 게임 세션 쪽이 camelCase 키(userId, balanceAfter, createdAt ...)로 씁니다.
#   파이썬에서는 snake_case 이름을 쓰고 저장 키는 alias로 맞춥니다.
# - userId는 사용자가 삭제된 뒤에도 남아 있을 수 있습니다 (cascade 삭제 없음)

from datetime import datetime
from typing import Optional
from beanie import Document, PydanticObjectId
from pydantic import ConfigDict, Field

class Game(Document):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[PydanticObjectId] = Field(None, alias="userId")
    number: int
    result: str
    points_change: int = Field(alias="pointsChange")
    balance_after: int = Field(alias="balanceAfter")
    created_at: datetime = Field(default_factory=datetime.utcnow, alias="createdAt")

    class Settings:
        name = "games"
