"""create courses, students and enrollment_counters

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-18

Enrollment numbers: {year}{course}{seq}, e.g. 2024BCA001. Unique across all students.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "a1b2c3d4e5f6"
down_revision = None
branch_labels = None
depends_on = None

COURSE_TYPES = ("BCA", "MCA", "BBA", "MBA", "BCOM", "MCOM")


def upgrade() -> None:
    course_type = postgresql.ENUM(*COURSE_TYPES, name="course_type")
    course_type.create(op.get_bind(), checkfirst=True)
    gender = postgresql.ENUM("MALE", "FEMALE", "OTHER", name="gender")
    gender.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "courses",
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", postgresql.ENUM(*COURSE_TYPES, name="course_type", create_type=False), nullable=False),
        sa.Column("duration_years", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("duration_years > 0", name="ck_courses_duration_positive"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("type"),
    )
    op.create_index(op.f("ix_courses_id"), "courses", ["id"], unique=False)
    op.create_index(op.f("ix_courses_is_active"), "courses", ["is_active"], unique=False)

    op.create_table(
        "enrollment_counters",
        sa.Column("course_type", postgresql.ENUM(*COURSE_TYPES, name="course_type", create_type=False), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("last_number", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("last_number >= 0", name="ck_enrollment_counters_last_number"),
        sa.PrimaryKeyConstraint("course_type", "year"),
    )

    op.create_table(
        "students",
        sa.Column("enrollment_number", sa.String(20), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(20), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("gender", postgresql.ENUM("MALE", "FEMALE", "OTHER", name="gender", create_type=False), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("course_id", sa.UUID(), nullable=False),
        sa.Column("admission_year", sa.Integer(), nullable=False),
        sa.Column("passout_year", sa.Integer(), nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.Column("idempotency_key", sa.String(64), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["course_id"], ["courses.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("idempotency_key"),
    )
    op.create_index(op.f("ix_students_id"), "students", ["id"], unique=False)
    op.create_index(op.f("ix_students_enrollment_number"), "students", ["enrollment_number"], unique=True)
    op.create_index(op.f("ix_students_course_id"), "students", ["course_id"], unique=False)
    op.create_index(op.f("ix_students_admission_year"), "students", ["admission_year"], unique=False)
    op.create_index(op.f("ix_students_created_by"), "students", ["created_by"], unique=False)
    op.create_index(op.f("ix_students_is_active"), "students", ["is_active"], unique=False)


def downgrade() -> None:
    op.drop_table("students")
    op.drop_table("enrollment_counters")
    op.drop_index(op.f("ix_courses_is_active"), table_name="courses")
    op.drop_index(op.f("ix_courses_id"), table_name="courses")
    op.drop_table("courses")
    postgresql.ENUM(name="gender").drop(op.get_bind(), checkfirst=True)
    postgresql.ENUM(name="course_type").drop(op.get_bind(), checkfirst=True)
