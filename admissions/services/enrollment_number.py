"""Enrollment number encoding and decoding.

Format: ``YYYY`` + course code + 3-digit sequence, e.g. ``2024BCA001``.
"""

import re
from typing import NamedTuple, Union

from admissions.models.enums import CourseType


SEQUENCE_MIN = 1
SEQUENCE_MAX = 999

ENROLLMENT_NUMBER_PATTERN = re.compile(
    r"^(\d{4})(" + "|".join(c.value for c in CourseType) + r")(\d{3})$",
    re.ASCII,
)


class InvalidEnrollmentNumber(ValueError):
    """Value is not a canonical enrollment number"""


class EnrollmentCapacityError(ValueError):
    """Sequence number does not fit the 3-digit field"""


class ParsedEnrollmentNumber(NamedTuple):
    year: int
    course_type: CourseType
    sequence_number: int


class EnrollmentNumberFormatter:
    """Pure conversions between enrollment numbers and their parts"""

    @staticmethod
    def format(
        admission_year: int,
        course_type: Union[CourseType, str],
        sequence_number: int,
    ) -> str:
        """
        Build the enrollment number for an allocated sequence.

        Raises:
            EnrollmentCapacityError: sequence_number outside 1..999
            InvalidEnrollmentNumber: year not 4 digits or unknown course code
        """
        if not SEQUENCE_MIN <= sequence_number <= SEQUENCE_MAX:
            raise EnrollmentCapacityError(
                f"Sequence number {sequence_number} is outside {SEQUENCE_MIN}-{SEQUENCE_MAX}"
            )
        if not 1000 <= admission_year <= 9999:
            raise InvalidEnrollmentNumber(f"Admission year {admission_year} is not a 4-digit year")
        try:
            code = CourseType(course_type).value
        except ValueError:
            raise InvalidEnrollmentNumber(f"Unknown course type {course_type!r}") from None
        return f"{admission_year}{code}{sequence_number:03d}"

    @staticmethod
    def parse(value: str) -> ParsedEnrollmentNumber:
        """
        Split a canonical enrollment number into year, course and sequence.
        Anything that is not a full match is rejected.
        """
        match = ENROLLMENT_NUMBER_PATTERN.fullmatch(value) if isinstance(value, str) else None
        if not match:
            raise InvalidEnrollmentNumber(f"{value!r} is not a valid enrollment number")
        sequence_number = int(match.group(3))
        if sequence_number < SEQUENCE_MIN:
            raise InvalidEnrollmentNumber(f"{value!r} has sequence 000")
        return ParsedEnrollmentNumber(
            year=int(match.group(1)),
            course_type=CourseType(match.group(2)),
            sequence_number=sequence_number,
        )

    @staticmethod
    def is_valid(value: str) -> bool:
        try:
            EnrollmentNumberFormatter.parse(value)
        except InvalidEnrollmentNumber:
            return False
        return True
