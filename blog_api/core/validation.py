"""Input validation for query parameters, path segments and comment bodies"""

from typing import Any, Mapping, Optional

from blog_api.core.errors import NotFoundError, ValidationError

# largest value a BIGINT column or offset can hold
MAX_ID = 2**63 - 1

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT = "createdAt,desc"

MAX_PAGE_SIZE = 100
SORT_FIELDS = ("createdAt", "updatedAt", "views", "title")
SORT_DIRECTIONS = ("asc", "desc")

COMMENT_CONTENT_LENGTH = (1, 500)
COMMENT_AUTHOR_LENGTH = (2, 20)


def parse_query_int(value: Any, default: int) -> Optional[int]:
    """Parse an integer query parameter; empty means default, garbage means None"""
    if value is None or str(value).strip() == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def validate_pagination(page: Optional[int], size: Optional[int]) -> list[str]:
    errors = []
    if page is None or page < 0:
        errors.append("page must be a non-negative integer")
    if size is None or size < 1 or size > MAX_PAGE_SIZE:
        errors.append(f"size must be between 1 and {MAX_PAGE_SIZE}")
    return errors


def parse_sort(sort: str) -> tuple[str, str]:
    """
    Split ``"field,direction"`` and validate both halves.

    The direction is case-insensitive and defaults to ``desc``.
    Returns ``(field, direction)`` with the direction lower-cased.
    """
    field, _, direction = (sort or "").partition(",")
    field = field.strip()
    direction = (direction.strip() or "desc").lower()

    errors = []
    if field not in SORT_FIELDS:
        errors.append(f"sort field must be one of: {', '.join(SORT_FIELDS)}")
    if direction not in SORT_DIRECTIONS:
        errors.append('sort direction must be "asc" or "desc"')
    if errors:
        raise ValidationError(", ".join(errors))
    return field, direction


def parse_post_id(value: Any) -> int:
    """Parse a path segment into a positive post id

    Ids past the store's integer range cannot exist and raise NotFoundError.
    """
    if value is None or str(value).strip() == "":
        raise ValidationError("Post ID is required")
    try:
        post_id = int(str(value).strip())
    except ValueError:
        raise ValidationError("Invalid post ID")
    if post_id < 1:
        raise ValidationError("Invalid post ID: must be a positive integer")
    if post_id > MAX_ID:
        raise NotFoundError("Post not found")
    return post_id


def _check_length(data: Mapping[str, Any], name: str, bounds: tuple[int, int]) -> str | None:
    value = data.get(name)
    if value is None or value == "":
        return f"{name} is required"
    if not isinstance(value, str):
        return f"{name} must be a string"

    minimum, maximum = bounds
    length = len(value.strip())
    if length < minimum:
        return f"{name} must be at least {minimum} characters"
    if length > maximum:
        return f"{name} must not exceed {maximum} characters"
    return None


def validate_comment(data: Mapping[str, Any] | None) -> list[str]:
    """Return every problem with a comment body; an empty list means valid"""
    data = data or {}
    errors = [
        _check_length(data, "content", COMMENT_CONTENT_LENGTH),
        _check_length(data, "author", COMMENT_AUTHOR_LENGTH),
    ]
    return [e for e in errors if e]
