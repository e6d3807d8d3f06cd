import argparse
import logging
import sys
from pathlib import Path

from catalog import find_integrity_problems, load_catalog
from core.logging_setup import setup_console_logging
from errors import CatalogError
from quiz_session import QuizSessionController

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect a quiz test catalog")
    parser.add_argument("catalog", type=Path, help="Path to catalog JSON file")
    parser.add_argument(
        "--test",
        type=str,
        default=None,
        help="Only show this test id, page by page",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log catalog loading details",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_console_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        catalog = load_catalog(args.catalog)
    except CatalogError as exc:
        logger.error("%s", exc)
        return 1

    controller = QuizSessionController(catalog)
    if args.test is not None:
        test = catalog.resolve(args.test)
        if test is None:
            logger.error("Test not found: %s", args.test)
            return 1
        controller.select_test(test.id)
        for page in range(controller.total_pages):
            controller.go_to_page(page)
            print(f"Page {page + 1} of {controller.total_pages}")
            for question in controller.current_page_questions:
                print(f"  [{question.id}] {question.text}")
    else:
        for test in catalog:
            controller.select_test(test.id)
            print(
                f"{test.id}\t{test.title}\t"
                f"{test.question_count} questions\t{controller.total_pages} pages"
            )

    problems = find_integrity_problems(catalog)
    for problem in problems:
        print(f"warning: {problem}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
