from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

ItemId = Union[str, int]

ITEMS_PER_PAGE = 10


@dataclass(frozen=True)
class TestOption:
    id: ItemId
    text: str


@dataclass(frozen=True)
class TestQuestion:
    id: ItemId
    text: str
    options: Tuple[TestOption, ...]
    correct_answer: ItemId

    def option(self, option_id: ItemId) -> TestOption | None:
        for option in self.options:
            if option.id == option_id:
                return option
        return None


@dataclass(frozen=True)
class TestDefinition:
    id: ItemId
    title: str
    questions: Tuple[TestQuestion, ...]

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def question(self, question_id: ItemId) -> TestQuestion | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


@dataclass(frozen=True)
class TestCatalog:
    tests: Tuple[TestDefinition, ...]

    def __iter__(self):
        return iter(self.tests)

    def __len__(self) -> int:
        return len(self.tests)

    @property
    def first(self) -> TestDefinition:
        return self.tests[0]

    def get(self, test_id: ItemId) -> TestDefinition | None:
        for test in self.tests:
            if test.id == test_id:
                return test
        return None

    def resolve(self, raw: ItemId) -> TestDefinition | None:
        """Find a test by id, matching a path string against numeric ids too."""
        test = self.get(raw)
        if test is not None:
            return test
        key = str(raw)
        for test in self.tests:
            if str(test.id) == key:
                return test
        return None


@dataclass(frozen=True)
class SessionState:
    test_id: ItemId
    page: int = 0
    answers: Dict[ItemId, ItemId] = field(default_factory=dict)
    submitted: bool = False
    selection_open: bool = False
