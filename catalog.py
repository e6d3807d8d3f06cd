from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from errors import CatalogError
from models import ItemId, TestCatalog, TestDefinition, TestOption, TestQuestion

logger = logging.getLogger(__name__)


def _require(payload: dict[str, Any], key: str, where: str) -> Any:
    if key not in payload:
        raise CatalogError(f"{where}: missing '{key}'")
    return payload[key]


def _require_id(payload: dict[str, Any], where: str) -> ItemId:
    value = _require(payload, "id", where)
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise CatalogError(f"{where}: 'id' must be a string or integer")
    return value


def _require_list(payload: dict[str, Any], key: str, where: str) -> list[Any]:
    value = _require(payload, key, where)
    if not isinstance(value, list):
        raise CatalogError(f"{where}: '{key}' must be a list")
    return value


def _parse_option(payload: object, where: str) -> TestOption:
    if not isinstance(payload, dict):
        raise CatalogError(f"{where}: option must be an object")
    return TestOption(
        id=_require_id(payload, where),
        text=str(payload.get("text", "")),
    )


def _parse_question(payload: object, where: str) -> TestQuestion:
    if not isinstance(payload, dict):
        raise CatalogError(f"{where}: question must be an object")
    question_id = _require_id(payload, where)
    where = f"{where} question {question_id!r}"
    options = tuple(
        _parse_option(option, f"{where} option #{index}")
        for index, option in enumerate(_require_list(payload, "options", where), start=1)
    )
    return TestQuestion(
        id=question_id,
        text=str(payload.get("text", "")),
        options=options,
        correct_answer=_require(payload, "correctAnswer", where),
    )


def _parse_test(payload: object, where: str) -> TestDefinition:
    if not isinstance(payload, dict):
        raise CatalogError(f"{where}: test must be an object")
    test_id = _require_id(payload, where)
    where = f"test {test_id!r}"
    questions = tuple(
        _parse_question(question, f"{where} #{index}")
        for index, question in enumerate(
            _require_list(payload, "questions", where), start=1
        )
    )
    return TestDefinition(
        id=test_id,
        title=str(payload.get("title", test_id)),
        questions=questions,
    )


def parse_catalog(document: object) -> TestCatalog:
    """
    Build a catalog from a decoded JSON document.

    Accepts either ``{"tests": [...]}`` or a bare list of tests. Only the
    structure is checked; correct answers are trusted to name an option.
    """
    if isinstance(document, dict):
        raw_tests = _require_list(document, "tests", "catalog")
    elif isinstance(document, list):
        raw_tests = document
    else:
        raise CatalogError("catalog: expected an object or a list of tests")

    if not raw_tests:
        raise CatalogError("catalog: no tests defined")

    tests: list[TestDefinition] = []
    seen: set[ItemId] = set()
    for index, raw_test in enumerate(raw_tests, start=1):
        test = _parse_test(raw_test, f"test #{index}")
        if test.id in seen:
            raise CatalogError(f"catalog: duplicate test id {test.id!r}")
        seen.add(test.id)
        tests.append(test)
    return TestCatalog(tuple(tests))


def load_catalog(path: Path) -> TestCatalog:
    """Load catalog from a UTF-8 JSON file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog {path}: {exc}") from exc
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Invalid JSON in catalog {path}: {exc}") from exc

    catalog = parse_catalog(document)
    logger.info(
        "Loaded catalog %s: %d tests, %d questions",
        path,
        len(catalog),
        sum(test.question_count for test in catalog),
    )
    return catalog


def find_integrity_problems(catalog: TestCatalog) -> list[str]:
    problems: list[str] = []
    for test in catalog:
        question_ids: set[ItemId] = set()
        for question in test.questions:
            label = f"test {test.id!r} question {question.id!r}"
            if question.id in question_ids:
                problems.append(f"{label}: duplicate question id")
            question_ids.add(question.id)

            option_ids = [option.id for option in question.options]
            if len(set(option_ids)) != len(option_ids):
                problems.append(f"{label}: duplicate option ids")
            if not question.options:
                problems.append(f"{label}: no options")
            elif question.option(question.correct_answer) is None:
                problems.append(
                    f"{label}: correct answer {question.correct_answer!r} "
                    "matches no option"
                )
    return problems
