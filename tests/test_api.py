"""Tests for the HTTP routes."""

import time

import pytest
from fastapi.testclient import TestClient

from pubcatalog import storage
from pubcatalog.catalog.store import get_catalog
from pubcatalog.config import Settings, get_settings
from pubcatalog.main import app


@pytest.fixture
def client(seed_catalog):
    app.dependency_overrides[get_catalog] = lambda: seed_catalog
    app.dependency_overrides[get_settings] = lambda: Settings(contact_delay=0.05)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _wait_until(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return False


class TestCatalogRoutes:
    def test_health(self, client):
        assert client.get("/").json()["status"] == "ok"

    def test_list_keeps_seed_order_without_sort(self, client):
        body = client.get("/api/catalog/publications").json()

        assert body["total"] == 8
        assert [i["id"] for i in body["items"]] == list(range(1, 9))
        assert body["count_label"] == "Найдено публикаций: 8"

    def test_filter_by_category(self, client):
        body = client.get("/api/catalog/publications", params={"category": "Статьи"}).json()

        assert [i["id"] for i in body["items"]] == [1, 7]
        assert body["items"][0]["pages_label"] == "45-62"

    def test_search_and_sort(self, client):
        body = client.get(
            "/api/catalog/publications", params={"q": "литератур", "sort": "year-asc"}
        ).json()

        assert [i["year"] for i in body["items"]] == [2022, 2022, 2023, 2024, 2024, 2024]

    def test_no_results(self, client):
        body = client.get("/api/catalog/publications", params={"q": "zzz"}).json()

        assert body["total"] == 0
        assert body["empty_message"] == "По вашему запросу ничего не найдено"

    def test_invalid_category(self, client):
        assert client.get("/api/catalog/publications", params={"category": "Блог"}).status_code == 422

    def test_invalid_sort(self, client):
        assert client.get("/api/catalog/publications", params={"sort": "pages"}).status_code == 422

    def test_get_publication(self, client):
        body = client.get("/api/catalog/publications/3").json()

        assert body["type"] == "Монографии"
        assert body["journal"] is None

    def test_get_missing_publication(self, client):
        assert client.get("/api/catalog/publications/99").status_code == 404

    def test_categories(self, client):
        body = client.get("/api/catalog/categories").json()

        assert body["categories"][0] == "Все"
        assert len(body["categories"]) == 7
        assert [o["value"] for o in body["sort_options"]] == ["year-desc", "year-asc", "title"]

    def test_about(self, client, seed_catalog):
        assert client.get("/api/about").json()["name"] == seed_catalog.author.name


class TestSessionRoutes:
    def _start(self, client):
        resp = client.post("/api/sessions")
        assert resp.status_code == 201
        return resp.json()["session_id"]

    def test_start_with_defaults(self, client):
        body = client.post("/api/sessions").json()

        assert body["state"]["selected_type"] == "Все"
        assert body["state"]["sort_order"] == "year-desc"
        assert body["catalog"]["total"] == 8

    def test_setters(self, client):
        sid = self._start(client)

        client.put(f"/api/sessions/{sid}/search", json={"query": "анализ"})
        client.put(f"/api/sessions/{sid}/category", json={"category": "Учебные пособия"})
        body = client.put(f"/api/sessions/{sid}/sort", json={"order": "title"}).json()

        assert [i["id"] for i in body["catalog"]["items"]] == [8]

    def test_tab_switch_keeps_filters(self, client):
        sid = self._start(client)
        client.put(f"/api/sessions/{sid}/category", json={"category": "Статьи"})

        about = client.put(f"/api/sessions/{sid}/tab", json={"tab": "about"}).json()
        back = client.put(f"/api/sessions/{sid}/tab", json={"tab": "catalog"}).json()

        assert about["catalog"] is None
        assert about["about"]["contact"]["can_submit"] is False
        assert back["catalog"]["total"] == 2

    def test_invalid_category(self, client):
        sid = self._start(client)

        resp = client.put(f"/api/sessions/{sid}/category", json={"category": "Блог"})

        assert resp.status_code == 422

    def test_unknown_session(self, client):
        assert client.get("/api/sessions/nope").status_code == 404

    def test_contact_submission(self, client):
        sid = self._start(client)
        client.put(f"/api/sessions/{sid}/tab", json={"tab": "about"})
        client.put(
            f"/api/sessions/{sid}/contact",
            json={"name": "Анна", "email": "anna@example.com", "message": "Добрый день"},
        )

        resp = client.post(f"/api/sessions/{sid}/contact/submit")

        assert resp.status_code == 202
        assert resp.json()["state"]["submitting"] is True
        assert client.post(f"/api/sessions/{sid}/contact/submit").status_code == 409

        assert _wait_until(
            lambda: len(client.get(f"/api/sessions/{sid}/acknowledgments").json()) == 1
        )
        state = client.get(f"/api/sessions/{sid}").json()["state"]
        assert state["submitting"] is False
        assert state["contact_form"] == {"name": "", "email": "", "message": ""}

    def test_contact_missing_field(self, client):
        sid = self._start(client)
        client.put(
            f"/api/sessions/{sid}/contact",
            json={"name": "Анна", "email": "", "message": "Добрый день"},
        )

        resp = client.post(f"/api/sessions/{sid}/contact/submit")

        assert resp.status_code == 422
        state = client.get(f"/api/sessions/{sid}").json()["state"]
        assert state["submitting"] is False
        assert state["contact_form"]["name"] == "Анна"

    def test_end_session_cancels_submission(self, client, seed_catalog):
        app.dependency_overrides[get_settings] = lambda: Settings(contact_delay=30)
        sid = self._start(client)
        client.put(
            f"/api/sessions/{sid}/contact",
            json={"name": "Анна", "email": "anna@example.com", "message": "Текст"},
        )
        client.post(f"/api/sessions/{sid}/contact/submit")
        session = storage.get_session(sid)

        assert client.delete(f"/api/sessions/{sid}").status_code == 204
        assert storage.get_session(sid) is None
        assert session.contact.submitting is False
        assert client.delete(f"/api/sessions/{sid}").status_code == 404

    def test_contact_edit_rejected_while_submitting(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(contact_delay=30)
        sid = self._start(client)
        form = {"name": "Анна", "email": "anna@example.com", "message": "Текст"}
        client.put(f"/api/sessions/{sid}/contact", json=form)
        client.post(f"/api/sessions/{sid}/contact/submit")

        resp = client.put(f"/api/sessions/{sid}/contact", json={**form, "message": "Другое"})

        assert resp.status_code == 409
        assert client.get(f"/api/sessions/{sid}").json()["state"]["contact_form"] == form

    def test_idle_sessions_expire(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(session_ttl=60)
        abandoned = [self._start(client) for _ in range(20)]
        for sid in abandoned:
            storage.SESSIONS[sid].last_seen -= 120

        live = self._start(client)

        assert list(storage.SESSIONS) == [live]
        assert client.get(f"/api/sessions/{abandoned[0]}").status_code == 404
