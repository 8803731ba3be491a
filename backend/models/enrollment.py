"""
Enrollment schemas.

Dependencies: pydantic
System role: Enrollment API contracts
"""

from pydantic import BaseModel


class EnrollResponse(BaseModel):
    """Result of enrolling in a course."""

    course_id: int
    session_id: int
    enrollment_count: int


class WithdrawResponse(BaseModel):
    course_id: int
    withdrawn: bool


class EnrollmentStatusResponse(BaseModel):
    course_id: int
    enrolled: bool
