# FastAPI 진입점
# - Beanie ODM 초기화 (MongoDB) / 종료 시 연결 해제
# - 라우터 등록
# - CORS 설정
# - 모든 오류 응답을 {statusCode, message} envelope로 통일

import logging
from datetime import datetime
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.database import close_db, init_db
from .schemas.response import ApiResponse
from .api.v1.admin import router as admin_router
from .api.v1.auth import router as auth_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(
    title="포인트 게임 관리자 API",
    description="사용자 계정 관리 및 게임 기록 조회 (관리자 전용)",
    version="1.0.0"
)

# CORS 허용 도메인 세팅
origins = [o.strip() for o in settings.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Beanie 초기화 (앱 시작 시 1회)
# 연결에 실패하면 서버를 띄우지 않습니다. 관리자 API는 모두 MongoDB가 필요합니다.
@app.on_event("startup")
async def app_init():
    try:
        await init_db()
    except Exception as e:
        logger.error(f"MongoDB connection failed: {e}")
        raise

@app.on_event("shutdown")
async def app_shutdown():
    close_db()

# 인증 실패(401), 권한 없음(403), 없는 경로(404) 등도 envelope로 응답
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    response = ApiResponse(exc.status_code, str(exc.detail)).to_response()
    if exc.headers:
        response.headers.update(exc.headers)
    return response

# 요청 본문 형식 오류는 422 대신 400으로 응답 (세부 검증 내용은 로그에만 기록)
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Invalid request payload on {request.method} {request.url.path}: {exc.errors()}")
    return ApiResponse(status.HTTP_400_BAD_REQUEST, "Invalid request payload").to_response()

# 간단한 헬스체크
@app.get("/")
async def root():
    return {"ok": True, "app": settings.APP_NAME, "time": datetime.utcnow().isoformat()}

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME, "version": "1.0.0"}

# API v1 라우터 등록
app.include_router(auth_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1")
