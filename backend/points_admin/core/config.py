# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from pydantic import Field

# 프로젝트 루트 디렉토리 경로 찾기
# 이 파일은 backend/points_admin/core/config.py에 있으므로 3단계 상위가 프로젝트 루트입니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "points-admin"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    MONGODB_URI: str = "mongodb://localhost:27017/points_game"
    # 서버 선택 타임아웃(밀리초). 이 시간 안에 연결하지 못하면 startup 시 실패로 기록됩니다.
    MONGODB_TIMEOUT_MS: int = 5000

    JWT_SECRET_KEY: str = Field(..., description="JWT 토큰 서명에 사용되는 비밀키. 반드시 강력한 랜덤 문자열로 설정하세요.")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    CORS_ALLOW_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # bcrypt 작업 계수 (cost factor). 값이 1 늘어날 때마다 해싱 시간이 2배가 됩니다.
    BCRYPT_ROUNDS: int = 12

    # 게임 기록 페이지네이션 기본값 (page/limit 파라미터가 없거나 숫자가 아닐 때 사용)
    DEFAULT_PAGE: int = 1
    DEFAULT_PAGE_LIMIT: int = 10

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
