"""Session-related Pydantic models."""
from pydantic import BaseModel


class SelectTestRequest(BaseModel):
    """Model for switching the active test."""

    testId: int | str


class SelectAnswerRequest(BaseModel):
    """Model for recording an answer."""

    questionId: int | str
    optionId: int | str


class GoToPageRequest(BaseModel):
    """Model for jumping to a page (clamped to the test's pages)."""

    page: int
