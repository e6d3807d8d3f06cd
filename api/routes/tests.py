"""Test catalog endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from api.services.session_service import SessionStore, get_session_store

router = APIRouter(prefix="/api/tests", tags=["tests"])


@router.get("")
def list_tests(
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> list[dict[str, object]]:
    """List all tests in the catalog, flagging the active one."""
    return store.list_tests()


@router.get("/{test_id}")
def get_test(
    test_id: str,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> dict[str, object]:
    """Get test metadata."""
    test = store.catalog.resolve(test_id)
    if test is None:
        raise HTTPException(status_code=404, detail="Test not found")
    return store.test_metadata(test)
