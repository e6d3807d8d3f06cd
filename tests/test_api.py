import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from catalog import parse_catalog
from errors import CatalogError

from conftest import make_test


@pytest.fixture
def client(catalog) -> TestClient:
    return TestClient(create_app(catalog=catalog))


def test_list_tests_flags_active(client: TestClient) -> None:
    response = client.get("/api/tests")
    assert response.status_code == 200
    tests = response.json()
    assert [test["id"] for test in tests] == ["alpha", "beta", 3]
    assert [test["isActive"] for test in tests] == [True, False, False]


def test_get_test_by_path_id(client: TestClient) -> None:
    response = client.get("/api/tests/3")
    assert response.status_code == 200
    assert response.json()["questionCount"] == 10
    assert client.get("/api/tests/missing").status_code == 404


def test_get_test_reports_active_flag(client: TestClient) -> None:
    assert client.get("/api/tests/alpha").json()["isActive"] is True
    assert client.get("/api/tests/beta").json()["isActive"] is False

    client.post("/api/session/test", json={"testId": "beta"})

    assert client.get("/api/tests/alpha").json()["isActive"] is False
    assert client.get("/api/tests/beta").json()["isActive"] is True


def test_session_flow(client: TestClient) -> None:
    view = client.get("/api/session").json()
    assert view["test"]["id"] == "alpha"
    assert view["result"] is None

    view = client.post("/api/session/answers", json={"questionId": 1, "optionId": 2}).json()
    assert view["questions"][0]["selected"] == 2

    view = client.post("/api/session/submit").json()
    assert view["submitted"] is True
    assert view["result"] == {"score": 1, "total": 15}

    view = client.post("/api/session/answers", json={"questionId": 2, "optionId": 2}).json()
    assert view["answeredCount"] == 1

    view = client.post("/api/session/reset").json()
    assert view["submitted"] is False
    assert view["answeredCount"] == 0
    assert view["page"] == 0


def test_answer_ids_sent_as_strings_are_matched(client: TestClient) -> None:
    view = client.post(
        "/api/session/answers", json={"questionId": "1", "optionId": "2"}
    ).json()
    assert view["questions"][0]["selected"] == 2
    assert view["answeredCount"] == 1


def test_select_test_switches_and_rejects_unknown(client: TestClient) -> None:
    client.post("/api/session/answers", json={"questionId": 1, "optionId": 2})
    client.post("/api/session/panel/toggle")

    view = client.post("/api/session/test", json={"testId": "3"}).json()
    assert view["test"]["id"] == 3
    assert view["answeredCount"] == 0
    assert view["selectionOpen"] is False

    response = client.post("/api/session/test", json={"testId": "missing"})
    assert response.status_code == 404
    assert client.get("/api/session").json()["test"]["id"] == 3


def test_paging_endpoints_clamp(client: TestClient) -> None:
    view = client.post("/api/session/page", json={"page": 99}).json()
    assert view["page"] == 1
    assert len(view["questions"]) == 5

    view = client.post("/api/session/page/next").json()
    assert view["page"] == 1

    view = client.post("/api/session/page/previous").json()
    assert view["page"] == 0

    view = client.post("/api/session/page", json={"page": -5}).json()
    assert view["page"] == 0


def test_invalid_bodies_are_rejected(client: TestClient) -> None:
    assert client.post("/api/session/page", json={"page": "last"}).status_code == 422
    assert client.post("/api/session/answers", json={"questionId": 1}).status_code == 422


def test_panel_endpoints(client: TestClient) -> None:
    assert client.post("/api/session/panel/toggle").json()["selectionOpen"] is True
    assert client.post("/api/session/panel/close").json()["selectionOpen"] is False


def test_create_app_loads_catalog_file(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"tests": [make_test("file", 3)]}), encoding="utf-8")
    client = TestClient(create_app(catalog_path=path))
    assert client.get("/api/session").json()["test"]["id"] == "file"


def test_create_app_fails_on_broken_catalog(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"tests": []}), encoding="utf-8")
    with pytest.raises(CatalogError):
        create_app(catalog_path=path)


def test_apps_do_not_share_sessions() -> None:
    catalog = parse_catalog([make_test(1, 2), make_test(2, 2)])
    first = TestClient(create_app(catalog=catalog))
    second = TestClient(create_app(catalog=catalog))
    first.post("/api/session/test", json={"testId": 2})
    assert second.get("/api/session").json()["test"]["id"] == 1
