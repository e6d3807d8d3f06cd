from pathlib import Path

import pytest

from catalog import parse_catalog
from models import TestCatalog

DATA_CATALOG = Path(__file__).resolve().parent.parent / "data" / "data.json"


def make_test(test_id, question_count: int, title: str | None = None) -> dict[str, object]:
    """Test document with 3 options per question; option 2 is always correct."""
    return {
        "id": test_id,
        "title": title or f"Test {test_id}",
        "questions": [
            {
                "id": index,
                "text": f"Question {index}",
                "options": [
                    {"id": option_id, "text": f"Option {option_id}"}
                    for option_id in (1, 2, 3)
                ],
                "correctAnswer": 2,
            }
            for index in range(1, question_count + 1)
        ],
    }


@pytest.fixture
def catalog_document() -> dict[str, object]:
    return {
        "tests": [
            make_test("alpha", 15),
            make_test("beta", 4),
            make_test(3, 10),
        ]
    }


@pytest.fixture
def catalog(catalog_document: dict[str, object]) -> TestCatalog:
    return parse_catalog(catalog_document)
