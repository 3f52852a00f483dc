# MongoDB 연결 / Beanie 초기화
# - 앱(main.py)과 관리자 계정 생성 스크립트(tasks/bootstrap_admin.py)가 함께 사용
# - 클라이언트는 프로세스당 하나. 종료 시 close_db()로 닫습니다.

import logging
from typing import Optional

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from .config import settings
from .retry import connect_retry
from ..models.game import Game
from ..models.user import User

logger = logging.getLogger(__name__)

DOCUMENT_MODELS = [User, Game]

_client: Optional[AsyncIOMotorClient] = None


@connect_retry
async def _ping(client: AsyncIOMotorClient) -> None:
    await client.admin.command("ping")


async def init_db(uri: str = None) -> AsyncIOMotorClient:
    global _client
    uri = uri or settings.MONGODB_URI
    client = AsyncIOMotorClient(uri, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS)
    await _ping(client)
    # users 컬렉션의 email unique 인덱스도 여기서 생성됩니다.
    await init_beanie(database=client.get_default_database(), document_models=DOCUMENT_MODELS)
    _client = client
    logger.info(f"MongoDB connected: {uri}")
    return client


def close_db() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB connection closed")
