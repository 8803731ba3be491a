"""
Course validation utilities.

Business logic validation not covered by Pydantic models.
These validators check domain-specific rules.

Dependencies: backend.models.course, backend.core.exceptions
System role: Course business logic validation
"""

from backend.core.exceptions import ValidationError
from backend.models.course import CreateCourseRequest, UpdateCourseRequest

ALLOWED_IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}


def _validate_name(name: str) -> None:
    if not name.strip():
        raise ValidationError("Course name cannot be empty or whitespace-only", field="name")

    if len(name.strip()) < 2:
        raise ValidationError("Course name must be at least 2 characters", field="name")


def _validate_image(image: str | None) -> None:
    if image is None:
        return
    dot = image.rfind(".")
    if dot == -1 or image[dot:].lower() not in ALLOWED_IMAGE_EXTENSIONS:
        raise ValidationError(
            f"Course image must be one of: {', '.join(sorted(ALLOWED_IMAGE_EXTENSIONS))}",
            field="image",
        )


def validate_course_creation(request: CreateCourseRequest) -> None:
    """
    Validate course creation request with business rules.

    Args:
        request: CreateCourseRequest with name, description, image

    Raises:
        ValidationError: If business validation fails
    """
    _validate_name(request.name)
    _validate_image(request.image)


def validate_course_update(request: UpdateCourseRequest) -> None:
    """
    Validate course update request with business rules.

    Raises:
        ValidationError: If business validation fails
    """
    _validate_name(request.name)
    _validate_image(request.image)

    # An empty URL would clear the primary video
    if request.video_url is not None and not request.video_url.strip():
        raise ValidationError("Video URL cannot be empty", field="video_url")
