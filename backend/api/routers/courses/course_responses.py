"""
Course response mapping utilities.

Transforms service dictionaries into Pydantic response models.
Centralizes response construction logic.

Dependencies: backend.models
System role: Course response transformation
"""

from typing import Any

from backend.application.services.course_service import CourseUpdateResult
from backend.models.comment import CommentResponse
from backend.models.course import CourseResponse, CourseUpdateResponse


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary containing course fields
            Expected keys: id, name, description, image, user_id, video_id,
            created_at, updated_at and optionally video_url

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> list[CourseResponse]:
    """
    Transform list of course dictionaries into list of CourseResponse.

    Args:
        courses_data: List of course dictionaries

    Returns:
        list[CourseResponse]: List of Pydantic models for API response
    """
    return [map_course_to_response(course) for course in courses_data]


def map_update_result_to_response(result: CourseUpdateResult) -> CourseUpdateResponse:
    """Transform a course edit outcome into CourseUpdateResponse."""
    return CourseUpdateResponse(
        updated=result.updated,
        previous_image=result.previous_image,
        course=map_course_to_response(result.course),
    )


def map_comments_to_response(comments_data: list[dict[str, Any]]) -> list[CommentResponse]:
    return [CommentResponse(**comment) for comment in comments_data]
