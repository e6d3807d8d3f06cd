"""Quiz session endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends

from api.models import GoToPageRequest, SelectAnswerRequest, SelectTestRequest
from api.services.session_service import SessionStore, get_session_store

router = APIRouter(prefix="/api/session", tags=["session"])

Store = Annotated[SessionStore, Depends(get_session_store)]


@router.get("")
def get_session(store: Store) -> dict[str, object]:
    """Get the current session view."""
    return store.view()


@router.post("/test")
def select_test(payload: SelectTestRequest, store: Store) -> dict[str, object]:
    """Switch to another test, discarding the current attempt."""
    return store.select_test(payload.testId)


@router.post("/answers")
def select_answer(payload: SelectAnswerRequest, store: Store) -> dict[str, object]:
    """Record an answer (ignored once submitted)."""
    return store.select_answer(payload.questionId, payload.optionId)


@router.post("/submit")
def submit(store: Store) -> dict[str, object]:
    """Grade the attempt."""
    return store.apply(lambda controller: controller.submit())


@router.post("/reset")
def reset(store: Store) -> dict[str, object]:
    """Retake the current test."""
    return store.apply(lambda controller: controller.reset())


@router.post("/page")
def go_to_page(payload: GoToPageRequest, store: Store) -> dict[str, object]:
    """Jump to a page."""
    return store.apply(lambda controller: controller.go_to_page(payload.page))


@router.post("/page/next")
def next_page(store: Store) -> dict[str, object]:
    return store.apply(lambda controller: controller.next_page())


@router.post("/page/previous")
def previous_page(store: Store) -> dict[str, object]:
    return store.apply(lambda controller: controller.previous_page())


@router.post("/panel/toggle")
def toggle_panel(store: Store) -> dict[str, object]:
    """Open or close the test selection panel."""
    return store.apply(lambda controller: controller.toggle_selection_panel())


@router.post("/panel/close")
def close_panel(store: Store) -> dict[str, object]:
    return store.apply(lambda controller: controller.close_selection_panel())
