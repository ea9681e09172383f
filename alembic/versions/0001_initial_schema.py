"""Initial schema: users, pets, tasks, preventatives, completions

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("firebase_uid", sa.String(128), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("first_name", sa.String(100)),
        sa.Column("last_name", sa.String(100)),
        *_timestamps(),
    )

    op.create_table(
        "pets",
        sa.Column("pet_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "owner_id",
            sa.Integer(),
            sa.ForeignKey("users.user_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("species", sa.String(30)),
        sa.Column("breed", sa.String(50)),
        sa.Column("sex", sa.Enum("M", "F", "Unknown", name="petsex"), server_default="Unknown"),
        sa.Column("birthdate", sa.Date()),
        sa.Column("adoption_date", sa.Date()),
        sa.Column("image_url", sa.String(255)),
        *_timestamps(),
    )
    op.create_index("ix_pets_owner_id", "pets", ["owner_id"])

    op.create_table(
        "daily_tasks",
        sa.Column("task_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "pet_id",
            sa.Integer(),
            sa.ForeignKey("pets.pet_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("task_name", sa.String(100), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_daily_tasks_pet_id", "daily_tasks", ["pet_id"])

    op.create_table(
        "preventatives",
        sa.Column("preventative_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "pet_id",
            sa.Integer(),
            sa.ForeignKey("pets.pet_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("due_day", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text()),
        *_timestamps(),
        sa.CheckConstraint("due_day >= 1 AND due_day <= 31", name="ck_preventatives_due_day_range"),
    )
    op.create_index("ix_preventatives_pet_id", "preventatives", ["pet_id"])

    op.create_table(
        "service_dog_tasks",
        sa.Column("task_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "pet_id",
            sa.Integer(),
            sa.ForeignKey("pets.pet_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("task_name", sa.String(100), nullable=False),
        sa.Column("notes", sa.Text()),
        *_timestamps(),
    )
    op.create_index("ix_service_dog_tasks_pet_id", "service_dog_tasks", ["pet_id"])

    # daily_tasks / preventatives 를 함께 가리키므로 FK 없이 task_type 으로 구분
    op.create_table(
        "task_completions",
        sa.Column("completion_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("task_type", sa.Enum("daily", "preventative", name="tasktype"), nullable=False),
        sa.Column("task_id", sa.Integer(), nullable=False),
        sa.Column("completion_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint(
            "task_type", "task_id", "completion_date",
            name="uq_task_completion_per_day",
        ),
    )


def downgrade() -> None:
    op.drop_table("task_completions")
    op.drop_index("ix_service_dog_tasks_pet_id", table_name="service_dog_tasks")
    op.drop_table("service_dog_tasks")
    op.drop_index("ix_preventatives_pet_id", table_name="preventatives")
    op.drop_table("preventatives")
    op.drop_index("ix_daily_tasks_pet_id", table_name="daily_tasks")
    op.drop_table("daily_tasks")
    op.drop_index("ix_pets_owner_id", table_name="pets")
    op.drop_table("pets")
    op.drop_table("users")
