from __future__ import annotations

from typing import Any

from models import TestDefinition, TestQuestion
from quiz_session import QuizSessionController, total_pages


def serialize_metadata(
    test: TestDefinition, active_id: object = None
) -> dict[str, Any]:
    return {
        "id": test.id,
        "title": test.title,
        "questionCount": test.question_count,
        "pageCount": total_pages(test),
        "isActive": test.id == active_id,
    }


def serialize_question(
    controller: QuizSessionController, question: TestQuestion
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": question.id,
        "text": question.text,
        "options": [
            {
                "id": option.id,
                "text": option.text,
                "state": controller.option_state(question, option).value,
            }
            for option in question.options
        ],
        "selected": controller.state.answers.get(question.id),
    }
    # Correctness is only revealed once the attempt is graded.
    if controller.submitted:
        payload["correctAnswer"] = question.correct_answer
        payload["isCorrect"] = controller.is_correct(question.id)
    return payload


def serialize_session(controller: QuizSessionController) -> dict[str, Any]:
    test = controller.current_test
    result = controller.result()
    return {
        "test": serialize_metadata(test, test.id),
        "page": controller.page,
        "totalPages": controller.total_pages,
        "hasPreviousPage": controller.has_previous_page,
        "hasNextPage": controller.has_next_page,
        "questions": [
            serialize_question(controller, question)
            for question in controller.current_page_questions
        ],
        # A list keeps numeric ids numeric; JSON object keys are always strings.
        "answers": [
            {"questionId": question_id, "optionId": option_id}
            for question_id, option_id in controller.answers.items()
        ],
        "answeredCount": len(controller.state.answers),
        "submitted": controller.submitted,
        "selectionOpen": controller.selection_open,
        "result": (
            {"score": result.score, "total": result.total}
            if result is not None
            else None
        ),
    }
