# 게임 기록 응답 스키마

from datetime import datetime
from typing import List, Optional
from beanie import PydanticObjectId
from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .user_schema import UserSummary

_response_config = ConfigDict(
    alias_generator=AliasGenerator(serialization_alias=to_camel),
    populate_by_name=True,
)

class GameEntry(BaseModel):
    model_config = _response_config

    id: PydanticObjectId = Field(alias="_id")
    user: Optional[UserSummary] = None  # 참조가 없거나 삭제된 사용자면 None
    number: int
    result: str
    points_change: int
    new_balance: int
    created_at: datetime

class Pagination(BaseModel):
    total: int
    page: int
    pages: int
    limit: int

class GamePage(BaseModel):
    games: List[GameEntry]
    pagination: Pagination
