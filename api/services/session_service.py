"""Service layer for the in-memory quiz session."""
from __future__ import annotations

import threading
from typing import Any, Callable

from fastapi import HTTPException, Request

from errors import UnknownTestError
from models import ItemId, TestCatalog, TestDefinition
from quiz_session import QuizSessionController
from serialization import serialize_metadata, serialize_session


class SessionStore:
    """
    Owns the one controller of the process.

    Sync endpoints run in a thread pool, so every transition and every
    view is taken under the same lock.
    """

    def __init__(self, catalog: TestCatalog):
        self.catalog = catalog
        self._controller = QuizSessionController(catalog)
        self._lock = threading.Lock()

    def view(self) -> dict[str, Any]:
        with self._lock:
            return serialize_session(self._controller)

    def list_tests(self) -> list[dict[str, Any]]:
        with self._lock:
            active_id = self._controller.state.test_id
        return [serialize_metadata(test, active_id) for test in self.catalog]

    def test_metadata(self, test: TestDefinition) -> dict[str, Any]:
        with self._lock:
            active_id = self._controller.state.test_id
        return serialize_metadata(test, active_id)

    def apply(
        self, action: Callable[[QuizSessionController], None]
    ) -> dict[str, Any]:
        """Run one transition and return the resulting session view."""
        with self._lock:
            action(self._controller)
            return serialize_session(self._controller)

    def select_test(self, raw_test_id: ItemId) -> dict[str, Any]:
        test = self.catalog.resolve(raw_test_id)
        if test is None:
            raise HTTPException(status_code=404, detail="Test not found")
        try:
            return self.apply(lambda controller: controller.select_test(test.id))
        except UnknownTestError as exc:
            raise HTTPException(status_code=404, detail="Test not found") from exc

    def select_answer(
        self, raw_question_id: ItemId, raw_option_id: ItemId
    ) -> dict[str, Any]:
        def action(controller: QuizSessionController) -> None:
            question_id, option_id = resolve_answer_ids(
                controller.current_test, raw_question_id, raw_option_id
            )
            controller.select_answer(question_id, option_id)

        return self.apply(action)


def _match_id(raw: ItemId, candidates: list[ItemId]) -> ItemId:
    if raw in candidates:
        return raw
    key = str(raw)
    for candidate in candidates:
        if str(candidate) == key:
            return candidate
    return raw


def resolve_answer_ids(
    test: TestDefinition, question_id: ItemId, option_id: ItemId
) -> tuple[ItemId, ItemId]:
    """Map ids that arrived as strings onto the catalog's own id values."""
    question_id = _match_id(question_id, [q.id for q in test.questions])
    question = test.question(question_id)
    if question is None:
        return question_id, option_id
    return question_id, _match_id(option_id, [o.id for o in question.options])


def get_session_store(request: Request) -> SessionStore:
    """Dependency to get the process session store."""
    return request.app.state.session_store
