# 인증 라우터
# - 로그인: POST /api/v1/auth/login (JWT Access 토큰 발급)
# 발급된 토큰의 sub/role 값이 관리자 라우터의 요청 주체가 됩니다.

import logging

from fastapi import APIRouter, Depends, status

from ...core.exceptions import NotFoundError
from ...core.security import create_access_token
from ...repositories.account_store import AccountStore
from ...schemas.response import ApiResponse
from ...schemas.user_schema import LoginRequest, TokenOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", summary="로그인 (JWT Access 토큰 발급)")
async def login(payload: LoginRequest, accounts: AccountStore = Depends(AccountStore)):
    try:
        user = await accounts.find_by_email(payload.email)
        valid = await accounts.verify_credential(str(user.id), payload.password)
    except NotFoundError:
        user, valid = None, False
    except Exception:
        logger.error("[auth.login] failed", exc_info=True)
        return ApiResponse(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error while logging in").to_response()

    if not valid:
        return ApiResponse(status.HTTP_401_UNAUTHORIZED, "Invalid credentials").to_response()

    token = create_access_token(str(user.id), user.role)
    return ApiResponse(status.HTTP_200_OK, "Logged in successfully", TokenOut(access_token=token)).to_response()
