"""Centralized Enum Definitions"""

import enum


class CourseType(str, enum.Enum):
    """Course codes recognised in enrollment numbers"""
    BCA = "BCA"
    MCA = "MCA"
    BBA = "BBA"
    MBA = "MBA"
    BCOM = "BCOM"
    MCOM = "MCOM"


class Gender(str, enum.Enum):
    """Student gender as captured on the admission form"""
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"
