"""Helpers shared by use cases."""

from uuid import UUID


def parse_uuid(value: str) -> UUID | None:
    """Parse a UUID string from a request.

    Args:
        value: Candidate UUID string

    Returns:
        The UUID, or None if the string is not a valid UUID
    """
    try:
        return UUID(value)
    except (ValueError, AttributeError, TypeError):
        return None
