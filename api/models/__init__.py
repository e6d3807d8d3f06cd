"""Pydantic models."""
from api.models.session import GoToPageRequest, SelectAnswerRequest, SelectTestRequest

__all__ = [
    "GoToPageRequest",
    "SelectAnswerRequest",
    "SelectTestRequest",
]
