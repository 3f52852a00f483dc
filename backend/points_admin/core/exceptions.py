# 커스텀 예외 클래스 정의
# - 계정/게임 저장소와 관리자 서비스에서 발생하는 오류 분류
# - 각 예외는 응답에 사용할 HTTP 상태 코드를 가지고 있습니다.
#   라우터는 예외 메시지가 아니라 고정된 안내 문구만 클라이언트에 돌려줍니다.

class AccountStoreError(Exception):
    """관리자 백엔드의 기본 예외 클래스

    try-except 블록에서 이 타입만 잡으면 분류된 오류 전체를 처리할 수 있습니다.
    분류되지 않은 예외(버그, 드라이버 오류 등)는 그대로 전파되어 500으로 처리됩니다.
    """
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AccountStoreError):
    """필수 입력값이 없거나 형식이 잘못된 경우

    Attributes:
        fields: 누락되었거나 잘못된 필드 이름 목록
    """
    status_code = 400

    def __init__(self, message: str, fields: list = None):
        self.fields = fields or []
        super().__init__(message)


class ConflictError(AccountStoreError):
    """유니크 키(이메일) 중복

    Attributes:
        field_name: 중복된 필드 이름
        field_value: 중복된 값
    """
    status_code = 400

    def __init__(self, field_name: str, field_value: any):
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(f"Duplicate value for unique field [{field_name}]")


class NotFoundError(AccountStoreError):
    """id로 문서를 찾지 못한 경우"""
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class ForbiddenError(AccountStoreError):
    """허용되지 않는 관리자 동작 (예: 자기 자신의 계정 삭제)"""
    status_code = 400


class StoreError(AccountStoreError):
    """그 밖의 영속성 계층 실패

    Attributes:
        operation: 실패한 저장소 작업 이름 (예: "users.insert")
    """
    status_code = 500

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"[{operation}] {message}")
