"""
gender.py
- Purpose: Enumerated gender labels stored on Employee rows.
- Design: Labels are the wire and storage representation; parsing is exact (case-sensitive).
"""

from enum import Enum


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
