"""
할 일 / 예방 관리 샘플 데이터 추가 스크립트

사용법:
    python scripts/add_sample_tasks.py <pet_id>

예시:
    python scripts/add_sample_tasks.py 1
    # pet_id=1 에 일일 할 일 3개와 예방 관리 항목 3개 추가
    # (due_day=31 항목은 30일/28일로 끝나는 달에는 마지막 날에 표시됨)
"""
import sys
import os

# 프로젝트 루트를 Python path에 추가
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from app.db import SessionLocal
from app.models.pet import Pet
from app.domains.preventatives.repository.preventative_repository import PreventativeRepository
from app.domains.tasks.repository.task_repository import TaskRepository

SAMPLE_DAILY_TASKS = ["아침 산책", "저녁 사료", "양치"]

SAMPLE_PREVENTATIVES = [
    # (name, due_day, notes)
    ("심장사상충 약", 1, "식후 복용"),
    ("외부 기생충 약", 15, None),
    ("월말 체중 측정", 31, "짧은 달에는 마지막 날"),
]


def add_sample_tasks(pet_id: int) -> bool:
    db = SessionLocal()

    try:
        pet = db.query(Pet).filter(Pet.pet_id == pet_id).first()
        if not pet:
            print(f"[오류] pet_id={pet_id}인 반려동물을 찾을 수 없습니다.")
            return False

        print(f"[OK] 반려동물: {pet.name} (pet_id={pet_id})")

        tasks = TaskRepository(db)
        for name in SAMPLE_DAILY_TASKS:
            task = tasks.create_daily_task(pet_id, name)
            print(f"  [daily] task_id={task.task_id} {name}")

        preventatives = PreventativeRepository(db)
        for name, due_day, notes in SAMPLE_PREVENTATIVES:
            p = preventatives.create(pet_id, name, due_day, notes)
            print(f"  [preventative] preventative_id={p.preventative_id} {name} (매월 {due_day}일)")

        db.commit()
        print(f"\n[성공] 일일 할 일 {len(SAMPLE_DAILY_TASKS)}개, "
              f"예방 관리 {len(SAMPLE_PREVENTATIVES)}개가 추가되었습니다!")
        return True

    except Exception as e:
        db.rollback()
        print(f"[오류] 오류 발생: {e}")
        import traceback
        traceback.print_exc()
        return False
    finally:
        db.close()


def list_available_pets():
    """사용 가능한 반려동물 목록 출력"""
    db = SessionLocal()
    try:
        pets = db.query(Pet).all()
        if not pets:
            print("등록된 반려동물이 없습니다.")
            return

        print("\n등록된 반려동물 목록:")
        print("-" * 60)
        for pet in pets:
            print(f"  pet_id={pet.pet_id:2d} | {pet.name:10s} | owner_id={pet.owner_id}")
        print("-" * 60)
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("사용법: python scripts/add_sample_tasks.py <pet_id>")
        print("\n사용 가능한 반려동물 목록:")
        list_available_pets()
        sys.exit(1)

    try:
        pet_id = int(sys.argv[1])
    except ValueError:
        print("[오류] pet_id 는 숫자여야 합니다.")
        sys.exit(1)

    success = add_sample_tasks(pet_id)
    sys.exit(0 if success else 1)
