"""Quiz session state machine.

Every transition is a pure function taking the catalog and the current
``SessionState`` and returning the next one. ``QuizSessionController`` owns
the single live state and is what the presentation layer talks to.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from errors import UnknownTestError
from models import (
    ITEMS_PER_PAGE,
    ItemId,
    SessionState,
    TestCatalog,
    TestDefinition,
    TestOption,
    TestQuestion,
)

logger = logging.getLogger(__name__)


class OptionDisplay(str, Enum):
    UNSELECTED = "unselected"
    SELECTED = "selected"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class SessionResult:
    score: int
    total: int


def total_pages(test: TestDefinition) -> int:
    """
    ceil(question_count / ITEMS_PER_PAGE), except that a test without
    questions has one empty page instead of none, so page 0 is always valid.
    """
    return max(1, math.ceil(test.question_count / ITEMS_PER_PAGE))


def clamp_page(test: TestDefinition, page: int) -> int:
    return max(0, min(total_pages(test) - 1, page))


def page_questions(test: TestDefinition, page: int) -> tuple[TestQuestion, ...]:
    start = page * ITEMS_PER_PAGE
    return test.questions[start:start + ITEMS_PER_PAGE]


def score(test: TestDefinition, answers: dict[ItemId, ItemId]) -> int:
    return sum(
        1
        for question in test.questions
        if question.id in answers and answers[question.id] == question.correct_answer
    )


# Transitions


def initial_state(catalog: TestCatalog) -> SessionState:
    return SessionState(test_id=catalog.first.id)


def active_test(catalog: TestCatalog, state: SessionState) -> TestDefinition:
    test = catalog.get(state.test_id)
    if test is None:
        raise UnknownTestError(state.test_id)
    return test


def select_test(
    catalog: TestCatalog, state: SessionState, test_id: ItemId
) -> SessionState:
    """Switch to another test, discarding answers and submission."""
    test = catalog.get(test_id)
    if test is None:
        raise UnknownTestError(test_id)
    return SessionState(test_id=test.id)


def select_answer(
    catalog: TestCatalog,
    state: SessionState,
    question_id: ItemId,
    option_id: ItemId,
) -> SessionState:
    if state.submitted:
        return state
    question = active_test(catalog, state).question(question_id)
    if question is None or question.option(option_id) is None:
        return state
    answers = dict(state.answers)
    answers[question.id] = option_id
    return replace(state, answers=answers)


def submit(catalog: TestCatalog, state: SessionState) -> SessionState:
    if state.submitted:
        return state
    return replace(state, submitted=True)


def reset(catalog: TestCatalog, state: SessionState) -> SessionState:
    return SessionState(test_id=state.test_id, selection_open=state.selection_open)


def go_to_page(catalog: TestCatalog, state: SessionState, page: int) -> SessionState:
    return replace(state, page=clamp_page(active_test(catalog, state), page))


def toggle_selection_panel(catalog: TestCatalog, state: SessionState) -> SessionState:
    return replace(state, selection_open=not state.selection_open)


def close_selection_panel(catalog: TestCatalog, state: SessionState) -> SessionState:
    return replace(state, selection_open=False)


class QuizSessionController:
    """Holds the live session state and exposes transitions and views."""

    def __init__(self, catalog: TestCatalog, state: SessionState | None = None):
        self.catalog = catalog
        self.state = state if state is not None else initial_state(catalog)
        active_test(catalog, self.state)

    # Views

    @property
    def current_test(self) -> TestDefinition:
        return active_test(self.catalog, self.state)

    @property
    def page(self) -> int:
        return self.state.page

    @property
    def total_pages(self) -> int:
        return total_pages(self.current_test)

    @property
    def answers(self) -> dict[ItemId, ItemId]:
        return dict(self.state.answers)

    @property
    def submitted(self) -> bool:
        return self.state.submitted

    @property
    def selection_open(self) -> bool:
        return self.state.selection_open

    @property
    def current_page_questions(self) -> tuple[TestQuestion, ...]:
        return page_questions(self.current_test, self.state.page)

    @property
    def has_previous_page(self) -> bool:
        return self.state.page > 0

    @property
    def has_next_page(self) -> bool:
        return self.state.page < self.total_pages - 1

    def score(self) -> int:
        return score(self.current_test, self.state.answers)

    def result(self) -> SessionResult | None:
        """Final score, available only once the attempt is submitted."""
        if not self.state.submitted:
            return None
        return SessionResult(self.score(), self.current_test.question_count)

    def is_selected(self, question_id: ItemId, option_id: ItemId) -> bool:
        return (
            question_id in self.state.answers
            and self.state.answers[question_id] == option_id
        )

    def is_correct(self, question_id: ItemId) -> bool:
        question = self.current_test.question(question_id)
        if question is None or question_id not in self.state.answers:
            return False
        return self.state.answers[question_id] == question.correct_answer

    def option_state(self, question: TestQuestion, option: TestOption) -> OptionDisplay:
        selected = self.is_selected(question.id, option.id)
        if not self.state.submitted:
            return OptionDisplay.SELECTED if selected else OptionDisplay.UNSELECTED
        if option.id == question.correct_answer:
            return OptionDisplay.CORRECT
        if selected:
            return OptionDisplay.INCORRECT
        return OptionDisplay.NEUTRAL

    # Transitions

    def select_test(self, test_id: ItemId) -> None:
        self.state = select_test(self.catalog, self.state, test_id)
        logger.info("Selected test %r", self.state.test_id)

    def select_answer(self, question_id: ItemId, option_id: ItemId) -> None:
        new_state = select_answer(self.catalog, self.state, question_id, option_id)
        if new_state is self.state:
            logger.debug(
                "Ignored answer %r for question %r (submitted=%s)",
                option_id,
                question_id,
                self.state.submitted,
            )
        self.state = new_state

    def submit(self) -> None:
        self.state = submit(self.catalog, self.state)
        logger.info(
            "Submitted test %r: %d/%d",
            self.state.test_id,
            self.score(),
            self.current_test.question_count,
        )

    def reset(self) -> None:
        self.state = reset(self.catalog, self.state)
        logger.info("Reset test %r", self.state.test_id)

    def go_to_page(self, page: int) -> None:
        self.state = go_to_page(self.catalog, self.state, page)
        logger.debug("Page %d of %d", self.state.page + 1, self.total_pages)

    def next_page(self) -> None:
        self.go_to_page(self.state.page + 1)

    def previous_page(self) -> None:
        self.go_to_page(self.state.page - 1)

    def toggle_selection_panel(self) -> None:
        self.state = toggle_selection_panel(self.catalog, self.state)

    def close_selection_panel(self) -> None:
        self.state = close_selection_panel(self.catalog, self.state)
