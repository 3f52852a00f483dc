# 요청/응답 스키마 정의 (Pydantic 모델)
# - DB 필드는 snake_case, JSON 응답/요청은 camelCase (+ 식별자는 "_id")
# - 응답용 모델은 Beanie projection에도 그대로 쓰이므로 hashed_password 필드가 없습니다.
#   즉, 비밀번호 해시는 쿼리 단계에서 제외되어 메모리에 올라오지 않습니다.

from datetime import datetime
from typing import Optional
from beanie import PydanticObjectId
from pydantic import AliasGenerator, BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

from ..models.user import Role

NULLABLE_FIELDS = ("bio",)

# 응답: 직렬화할 때만 camelCase 별칭을 사용합니다.
# (검증용 alias를 두지 않아야 Beanie projection이 DB 필드명(snake_case)으로 만들어집니다.)
_response_config = ConfigDict(
    alias_generator=AliasGenerator(serialization_alias=to_camel),
    populate_by_name=True,
)

# 요청: camelCase 키를 받고, 파이썬 쪽에서는 snake_case 이름으로 사용합니다.
_request_config = ConfigDict(
    alias_generator=AliasGenerator(validation_alias=to_camel),
    populate_by_name=True,
    extra="ignore",
)

class UserPublic(BaseModel):
    model_config = _response_config

    id: PydanticObjectId = Field(alias="_id")
    first_name: str
    last_name: str
    email: str
    phone: str
    role: Role = "user"
    points: int = 0
    bio: Optional[str] = None
    created_at: datetime

class UserSummary(BaseModel):
    # 게임 기록에 붙는 사용자 표시 정보
    model_config = _response_config

    id: PydanticObjectId = Field(alias="_id")
    first_name: str
    last_name: str

class UserCreate(BaseModel):
    # 필수값 검사는 서비스에서 직접 합니다 (누락 시 고정 메시지로 400 응답).
    model_config = _request_config

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None

class UserUpdate(BaseModel):
    # password 필드는 선언하지 않습니다. 요청에 포함되어도 무시됩니다.
    model_config = _request_config

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1)
    role: Optional[Role] = None
    points: Optional[int] = None
    bio: Optional[str] = None

    @model_validator(mode="after")
    def _reject_nulls(self):
        # bio만 null로 지울 수 있습니다. 나머지 필수 필드에 null이 오면 400으로 거절합니다.
        for name in self.model_fields_set:
            if name not in NULLABLE_FIELDS and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class TokenOut(BaseModel):
    model_config = _response_config

    access_token: str
    token_type: str = "bearer"
