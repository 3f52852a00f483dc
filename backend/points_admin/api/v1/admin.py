# 관리자 라우터 (admin 역할 필요)
# - GET    /api/v1/admin/games?page=&limit= : 게임 기록 (최신순, 페이지네이션)
# - GET    /api/v1/admin/users              : 사용자 목록 (비밀번호 제외)
# - POST   /api/v1/admin/users              : 사용자 생성
# - PATCH  /api/v1/admin/users/{user_id}    : 사용자 수정 (비밀번호 수정 불가)
# - DELETE /api/v1/admin/users/{user_id}    : 사용자 삭제 (자기 자신 삭제 불가)
#
# 각 핸들러가 자신의 오류를 직접 분류해서 고정 메시지로 응답합니다.
# 예외 메시지나 스택 트레이스는 로그에만 남기고 응답에는 싣지 않습니다.

import logging
from typing import Union

from fastapi import APIRouter, Depends, status

from ...core.config import settings
from ...core.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError
from ...core.security import Principal, require_admin
from ...schemas.response import ApiResponse
from ...schemas.user_schema import UserCreate, UserUpdate
from ...services.admin_service import AdminService, get_admin_service, parse_positive_int

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])

USER_NOT_FOUND = "User not found"


@router.get("/games", summary="전체 게임 기록 (관리자 전용)")
async def list_games(
    page: Union[str, None] = None,
    limit: Union[str, None] = None,
    service: AdminService = Depends(get_admin_service),
):
    page_no = parse_positive_int(page, settings.DEFAULT_PAGE)
    page_size = parse_positive_int(limit, settings.DEFAULT_PAGE_LIMIT)
    try:
        result = await service.list_games(page_no, page_size)
    except Exception:
        logger.error(f"[admin.list_games] failed (page={page_no}, limit={page_size})", exc_info=True)
        return ApiResponse(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error while retrieving game history").to_response()
    return ApiResponse(status.HTTP_200_OK, "Game history retrieved successfully", result).to_response()


@router.get("/users", summary="전체 사용자 목록 (비밀번호 제외)")
async def list_users(service: AdminService = Depends(get_admin_service)):
    try:
        users = await service.list_users()
    except Exception:
        logger.error("[admin.list_users] failed", exc_info=True)
        return ApiResponse(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error while retrieving users").to_response()
    return ApiResponse(status.HTTP_200_OK, "Users retrieved successfully", users).to_response()


@router.post("/users", summary="사용자 생성")
async def create_user(payload: UserCreate, service: AdminService = Depends(get_admin_service)):
    try:
        user = await service.create_user(payload.model_dump(exclude_none=True))
    except ValidationError as e:
        logger.info(f"[admin.create_user] missing fields: {e.fields}")
        return ApiResponse(status.HTTP_400_BAD_REQUEST, "All required fields must be provided").to_response()
    except ConflictError:
        logger.info("[admin.create_user] duplicate email")
        return ApiResponse(status.HTTP_400_BAD_REQUEST, "A user with this email already exists").to_response()
    except Exception:
        logger.error("[admin.create_user] failed", exc_info=True)
        return ApiResponse(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error while creating the user").to_response()
    return ApiResponse(status.HTTP_201_CREATED, "User created successfully", user).to_response()


@router.patch("/users/{user_id}", summary="사용자 수정 (비밀번호 제외)")
async def update_user(user_id: str, payload: UserUpdate, service: AdminService = Depends(get_admin_service)):
    try:
        user = await service.update_user(user_id, payload.model_dump(exclude_unset=True))
    except NotFoundError:
        return ApiResponse(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND).to_response()
    except ConflictError:
        logger.info(f"[admin.update_user] duplicate email for {user_id}")
        return ApiResponse(status.HTTP_400_BAD_REQUEST, "A user with this email already exists").to_response()
    except Exception:
        logger.error(f"[admin.update_user] failed for {user_id}", exc_info=True)
        return ApiResponse(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error while updating the user").to_response()
    return ApiResponse(status.HTTP_200_OK, "User updated successfully", user).to_response()


@router.delete("/users/{user_id}", summary="사용자 삭제 (자기 자신 제외)")
async def delete_user(
    user_id: str,
    principal: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
):
    try:
        await service.delete_user(principal.id, user_id)
    except ForbiddenError:
        logger.info(f"[admin.delete_user] self-delete refused for {principal.id}")
        return ApiResponse(status.HTTP_400_BAD_REQUEST, "You cannot delete your own account").to_response()
    except NotFoundError:
        return ApiResponse(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND).to_response()
    except Exception:
        logger.error(f"[admin.delete_user] failed for {user_id}", exc_info=True)
        return ApiResponse(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error while deleting the user").to_response()
    return ApiResponse(status.HTTP_200_OK, "User deleted successfully").to_response()
