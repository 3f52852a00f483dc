# 공통 응답 envelope
# - 성공/실패 모두 {statusCode, message, data?} 형태로 응답합니다.
# - data가 없으면 키 자체를 생략합니다.

from typing import Any, Optional
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

class ApiResponse:
    def __init__(self, status_code: int, message: str, data: Optional[Any] = None):
        self.status_code = status_code
        self.message = message
        self.data = data

    def to_dict(self) -> dict:
        body = {"statusCode": self.status_code, "message": self.message}
        if self.data is not None:
            # Pydantic 모델은 camelCase 별칭으로 직렬화됩니다 (ObjectId -> str, datetime -> ISO 문자열)
            body["data"] = jsonable_encoder(self.data, by_alias=True)
        return body

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_dict())
