#!/usr/bin/env python3
"""
Seed the six courses admissions can be made into.

Usage:
  python scripts/seed_courses.py
  # Requires DATABASE_URL in .env (or export)

Existing courses (matched by type) are left untouched.
"""
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select

from admissions.database import AsyncSessionLocal, close_db
from admissions.models import Course, CourseType

COURSES = [
    (CourseType.BCA, "Bachelor of Computer Applications", 3),
    (CourseType.MCA, "Master of Computer Applications", 2),
    (CourseType.BBA, "Bachelor of Business Administration", 3),
    (CourseType.MBA, "Master of Business Administration", 2),
    (CourseType.BCOM, "Bachelor of Commerce", 3),
    (CourseType.MCOM, "Master of Commerce", 2),
]


async def seed() -> int:
    created = 0
    async with AsyncSessionLocal() as db:
        result = await db.execute(select(Course.type))
        existing = set(result.scalars().all())
        for course_type, name, duration in COURSES:
            if course_type in existing:
                continue
            db.add(Course(type=course_type, name=name, duration_years=duration, is_active=True))
            created += 1
        await db.commit()
    await close_db()
    return created


def main():
    created = asyncio.run(seed())
    print(f"Seeded {created} course(s).")


if __name__ == "__main__":
    main()
