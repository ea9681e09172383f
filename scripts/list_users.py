"""
등록된 사용자 목록 출력 스크립트

사용법:
    python scripts/list_users.py
"""
import sys
import os

# 프로젝트 루트를 Python path에 추가
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from app.db import SessionLocal
from app.domains.users.repository.user_repository import UserRepository


def list_users() -> int:
    """사용자를 최신순으로 출력하고 사용자 수를 반환"""
    db = SessionLocal()
    try:
        users = UserRepository(db).list_users()
        if not users:
            print("등록된 사용자가 없습니다.")
            return 0

        print(f"\n등록된 사용자 ({len(users)}명):")
        print("-" * 80)
        for user in users:
            name = " ".join(n for n in (user.first_name, user.last_name) if n) or "-"
            print(f"  user_id={user.user_id:3d} | {user.email:30s} | {name:20s} | "
                  f"pets={len(user.pets)} | created_at={user.created_at}")
        print("-" * 80)
        return len(users)
    finally:
        db.close()


if __name__ == "__main__":
    list_users()
