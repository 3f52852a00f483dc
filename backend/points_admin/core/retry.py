# 재시도 로직 유틸리티
# - 앱 시작 시 MongoDB 연결(ping)만 재시도합니다.
# - 요청 처리 중의 저장소 오류는 재시도하지 않고 그대로 호출자에게 전파합니다.

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
    after_log,
)
import logging
from typing import Type, Tuple

from pymongo.errors import ConnectionFailure

logger = logging.getLogger(__name__)


def create_connect_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (ConnectionFailure,)
):
    """
    DB 연결용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    1. max_attempts: 최대 시도 횟수 (처음 1번 + 재시도 포함)
    2. initial_wait: 첫 재시도 전 대기 시간 (초). 지수 백오프의 시작 값입니다.
    3. max_wait: 최대 대기 시간 (초)
    4. exceptions: 재시도할 예외 타입. ServerSelectionTimeoutError는 ConnectionFailure의 하위 타입입니다.

    마지막 시도까지 실패하면 원래 예외를 다시 발생시킵니다.
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=2,
            min=initial_wait,
            max=max_wait
        ),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.ERROR),
        reraise=True,
    )


connect_retry = create_connect_retry_decorator(
    max_attempts=3,
    initial_wait=1.0,
    max_wait=10.0
)
