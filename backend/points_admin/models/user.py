# User 도메인 모델 (Beanie Document)
# - 이름, 이메일, 전화번호, 비밀번호 해시, 역할, 포인트, 소개, 생성일
# - 이메일은 unique 인덱스 (중복 검사는 최종적으로 DB가 보장)
# - hashed_password에는 항상 bcrypt 해시만 저장됩니다. 해싱은 AccountStore에서 명시적으로 수행합니다.

from datetime import datetime
from typing import Literal, Optional
from beanie import Document, Indexed
from pydantic import EmailStr, Field

Role = Literal["user", "admin"]

class User(Document):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: Indexed(EmailStr, unique=True)  # 중복 방지 인덱스
    phone: str
    hashed_password: str = Field(repr=False)
    role: Role = "user"
    points: int = 0
    bio: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "users"  # 컬렉션명
