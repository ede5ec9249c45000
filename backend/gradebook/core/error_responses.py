"""
Standardized error response messages and builders.

Analysis itself never fails on data conditions (missing answers, zero
variance and the like come back as None fields). The errors here cover
requests the service refuses to process at all.

Usage:
    from gradebook.core.error_responses import ErrorMessages, raise_payload_too_large

    raise_payload_too_large(ErrorMessages.analysis_too_large(cells=250000, limit=100000))
"""

from typing import NoReturn

from fastapi import HTTPException, status


class ErrorMessages:
    """Centralized error message constants and templates.

    Naming Convention:
    - Constants: SCREAMING_SNAKE_CASE for static messages
    - Methods: snake_case for templates that accept parameters
    """

    INTERNAL_ERROR = "An unexpected error occurred. Please try again later."
    DUPLICATE_ITEM_KEYS = "Item keys must be unique."
    DUPLICATE_STUDENT_IDS = "Student ids must be unique."

    @staticmethod
    def analysis_too_large(cells: int, limit: int) -> str:
        return (
            f"Analysis grid has {cells} cells, which exceeds the limit of {limit}. "
            "Please analyse fewer students or items at a time."
        )


def raise_bad_request(detail: str) -> NoReturn:
    """Raise HTTP 400 Bad Request."""
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def raise_payload_too_large(detail: str) -> NoReturn:
    """Raise HTTP 413 Payload Too Large."""
    raise HTTPException(status_code=413, detail=detail)
