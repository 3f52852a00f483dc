# 첫 관리자 계정 생성 스크립트
# - 관리자 API는 admin 토큰이 있어야 호출할 수 있으므로, 최초 1명은 이 스크립트로 만듭니다.
# - 사용법: python -m points_admin.tasks.bootstrap_admin --email admin@example.com --first-name Ada --last-name Admin --phone 0100000000
#   비밀번호는 프롬프트로 입력받습니다.

import argparse
import asyncio
import getpass
import logging

from ..core.database import close_db, init_db
from ..core.exceptions import ConflictError, ValidationError
from ..repositories.account_store import AccountStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--first-name", required=True)
    parser.add_argument("--last-name", required=True)
    parser.add_argument("--phone", required=True)
    return parser


async def create_admin(fields: dict, store: AccountStore = None):
    store = store or AccountStore()
    return await store.create({**fields, "role": "admin"})


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)
    password = getpass.getpass("Password: ")
    fields = {
        "email": args.email,
        "first_name": args.first_name,
        "last_name": args.last_name,
        "phone": args.phone,
        "password": password,
    }

    async def _run():
        await init_db()
        try:
            return await create_admin(fields)
        finally:
            close_db()

    try:
        user = asyncio.run(_run())
    except ConflictError:
        logger.error(f"An account with email {args.email} already exists")
        return 1
    except ValidationError as e:
        logger.error(f"Missing required fields: {e.fields}")
        return 1
    logger.info(f"Admin account created: {user.id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
