from __future__ import annotations

import json

from fastapi.testclient import TestClient

from explorer_api.app.core.store import InMemoryStore, JSONFileStore, get_store
from explorer_api.app.main import app
from tests.conftest import API, make_document


def _article(article_id: str, title: str, summary: str = "", source: str | None = "s1") -> dict:
    return {
        "id": article_id,
        "title": title,
        "summary": summary,
        "url": f"https://noticias.ex/{article_id}",
        "image": "",
        "publishedAt": "2025-01-01T00:00:00.000Z",
        "sourceId": source,
    }


def _image(image_id: str, title: str) -> dict:
    return {"id": image_id, "title": title, "url": "u", "thumb": "t", "sourceId": "s3"}


def test_health(client: TestClient) -> None:
    resp = client.get(f"{API}/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["time"].endswith("Z")


def test_highlights_are_cached_for_a_minute(client: TestClient) -> None:
    resp = client.get(f"{API}/highlights")
    assert resp.status_code == 200
    assert resp.headers["cache-control"] == "public, max-age=60"
    items = resp.json()["items"]
    assert items[0]["id"] == "h1"
    assert items[0]["publishedAt"]
    assert items[0]["sourceId"] == "s1"


def test_sources_and_trending_are_plain_lists(client: TestClient) -> None:
    sources = client.get(f"{API}/sources")
    trending = client.get(f"{API}/trending")
    assert [s["id"] for s in sources.json()["items"]] == ["s1", "s2", "s3"]
    assert trending.json()["items"] == [
        {"id": "t1", "topic": "Economia", "score": 92},
        {"id": "t2", "topic": "IA", "score": 88},
    ]
    assert "cache-control" not in sources.headers
    assert "cache-control" not in trending.headers


def test_trending_keeps_stored_order(store: InMemoryStore, client: TestClient) -> None:
    store.save(make_document(trending=[
        {"id": "t1", "topic": "Baixo", "score": 1},
        {"id": "t2", "topic": "Alto", "score": 99},
    ]))
    items = client.get(f"{API}/trending").json()["items"]
    assert [t["id"] for t in items] == ["t1", "t2"]


def test_news_list_is_paginated_and_cached(client: TestClient) -> None:
    resp = client.get(f"{API}/news")
    assert resp.status_code == 200
    assert resp.headers["cache-control"] == "public, max-age=30"
    body = resp.json()
    assert body["page"] == 1
    assert body["limit"] == 10
    assert body["total"] == 2
    assert body["pages"] == 1
    assert [n["id"] for n in body["data"]] == ["n1", "n2"]


def test_news_filters_by_source_then_text(store: InMemoryStore, client: TestClient) -> None:
    store.save(make_document(news=[
        _article("a", "Economia global em foco", source="s1"),
        _article("b", "Economia local", source="s2"),
        _article("c", "Esportes", summary="economia do futebol", source="s1"),
        _article("d", "Clima", source="s1"),
    ]))
    body = client.get(f"{API}/news", params={"q": "ECONOMIA", "source": "s1"}).json()
    assert [n["id"] for n in body["data"]] == ["a", "c"]
    assert body["total"] == 2

    # source is an exact match
    assert client.get(f"{API}/news", params={"source": "S1"}).json()["total"] == 0


def test_news_bad_pagination_falls_back_to_defaults(store: InMemoryStore, client: TestClient) -> None:
    store.save(make_document(news=[_article(f"n{i}", f"Item {i}") for i in range(30)]))
    body = client.get(f"{API}/news", params={"page": "abc", "limit": "xyz"}).json()
    assert (body["page"], body["limit"], body["pages"]) == (1, 10, 3)
    body = client.get(f"{API}/news", params={"page": "3", "limit": "500"}).json()
    assert (body["page"], body["limit"], len(body["data"])) == (3, 100, 0)
    body = client.get(f"{API}/news", params={"page": "2", "limit": "7"}).json()
    assert [n["id"] for n in body["data"]] == [f"n{i}" for i in range(7, 14)]


def test_article_is_merged_with_likes() -> None:
    store = InMemoryStore(make_document(
        news=[_article("n1", "Mercados subiram hoje")],
        likes={"articles": {"n1": 1}, "images": {}},
    ))
    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app) as client:
            resp = client.get(f"{API}/news/n1")
            assert resp.status_code == 200
            assert resp.headers["cache-control"] == "public, max-age=30"
            body = resp.json()
            assert body["id"] == "n1"
            assert body["title"] == "Mercados subiram hoje"
            assert body["likes"] == 1
    finally:
        app.dependency_overrides.clear()


def test_article_without_likes_reports_zero(client: TestClient) -> None:
    assert client.get(f"{API}/news/n2").json()["likes"] == 0


def test_unknown_article_is_404(client: TestClient) -> None:
    resp = client.get(f"{API}/news/doesnotexist")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


def test_stored_articles_are_returned_as_stored(store: InMemoryStore, client: TestClient) -> None:
    extra = {"id": "n1", "title": "T", "url": "u", "author": "Ana", "tags": ["x"]}
    store.save(make_document(
        news=[extra, {"id": "n2", "title": 42, "url": "v"}],
        highlights=[{"id": "h1", "title": "Destaque", "category": "economia"}],
    ))
    assert client.get(f"{API}/news/n1").json() == {**extra, "likes": 0}

    listed = client.get(f"{API}/news")
    assert listed.status_code == 200
    assert listed.json()["data"] == [extra, {"id": "n2", "title": 42, "url": "v"}]

    hits = client.get(f"{API}/search", params={"q": "t"}).json()["data"]
    assert hits == [{**extra, "type": "news"}]

    highlights = client.get(f"{API}/highlights").json()["items"]
    assert highlights == [{"id": "h1", "title": "Destaque", "category": "economia"}]


def test_images_filter_on_title(store: InMemoryStore, client: TestClient) -> None:
    store.save(make_document(images=[_image("i1", "Paisagem"), _image("i2", "Retrato"), {"id": "i3"}]))
    resp = client.get(f"{API}/images", params={"q": "paisa"})
    assert resp.headers["cache-control"] == "public, max-age=60"
    body = resp.json()
    assert [i["id"] for i in body["data"]] == ["i1"]
    assert body["data"][0]["thumb"] == "t"


def test_search_requires_q(client: TestClient) -> None:
    for params in ({}, {"q": ""}):
        resp = client.get(f"{API}/search", params=params)
        assert resp.status_code == 400
        assert resp.json() == {"error": "q parameter required"}


def test_search_lists_news_before_images(store: InMemoryStore, client: TestClient) -> None:
    store.save(make_document(
        news=[
            _article("a", "Tech news"),
            _article("b", "Culinária"),
            _article("c", "Mercado", summary="fintech cresce"),
        ],
        images=[_image("i1", "TECH expo"), _image("i2", "Natureza")],
    ))
    resp = client.get(f"{API}/search", params={"q": "tech"})
    assert resp.status_code == 200
    assert "cache-control" not in resp.headers
    body = resp.json()
    assert [(h["type"], h["id"]) for h in body["data"]] == [("news", "a"), ("news", "c"), ("image", "i1")]
    assert body["total"] == 3

    second = client.get(f"{API}/search", params={"q": "tech", "limit": "2", "page": "2"}).json()
    assert [(h["type"], h["id"]) for h in second["data"]] == [("image", "i1")]
    assert second["pages"] == 2


def test_like_twice_persists(file_client: TestClient, data_path) -> None:
    for expected in (1, 2):
        resp = file_client.post(f"{API}/like", json={"type": "article", "id": "n1"})
        assert resp.status_code == 200
        assert resp.json() == {"id": "n1", "type": "article", "likes": expected}
    assert JSONFileStore(data_path).load()["likes"]["articles"]["n1"] == 2
    assert file_client.get(f"{API}/news/n1").json()["likes"] == 2


def test_like_image(store: InMemoryStore, client: TestClient) -> None:
    resp = client.post(f"{API}/like", json={"type": "image", "id": "img1"})
    assert resp.json()["likes"] == 1
    assert store.load()["likes"]["images"] == {"img1": 1}


def test_like_rejects_missing_and_unknown_type(store: InMemoryStore, client: TestClient) -> None:
    resp = client.post(f"{API}/like", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "type and id required"}

    resp = client.post(f"{API}/like", json={"type": "article", "id": ""})
    assert resp.json() == {"error": "id required"}

    resp = client.post(f"{API}/like", json={"type": "video", "id": "x"})
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("type:")
    assert store.saves == 0


def test_numeric_message_and_id_are_read_as_text(store: InMemoryStore, client: TestClient) -> None:
    resp = client.post(f"{API}/feedback", json={"message": 5})
    assert resp.status_code == 200
    assert store.load()["feedback"][0]["message"] == "5"

    resp = client.post(f"{API}/like", json={"type": "article", "id": 7})
    assert resp.status_code == 200
    assert resp.json() == {"id": "7", "type": "article", "likes": 1}
    assert store.load()["likes"]["articles"] == {"7": 1}

    resp = client.post(f"{API}/like", json={"type": "article", "id": True})
    assert resp.status_code == 400


def test_feedback_is_appended(store: InMemoryStore, client: TestClient) -> None:
    resp = client.post(f"{API}/feedback", json={"message": "Ótimo!", "context": {"page": "home"}})
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    entries = store.load()["feedback"]
    assert len(entries) == 1
    assert entries[0]["message"] == "Ótimo!"
    assert entries[0]["context"] == {"page": "home"}
    assert len(entries[0]["id"]) == 8
    assert entries[0]["createdAt"].endswith("Z")

    client.post(f"{API}/feedback", json={"message": "sem contexto"})
    assert store.load()["feedback"][1]["context"] is None


def test_feedback_without_message_is_rejected(store: InMemoryStore, client: TestClient) -> None:
    resp = client.post(f"{API}/feedback", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "message required"}
    assert store.load()["feedback"] == []
    assert store.saves == 0


def test_feedback_without_body_is_rejected(client: TestClient) -> None:
    resp = client.post(f"{API}/feedback")
    assert resp.status_code == 400
    assert resp.json() == {"error": "request body required"}


def test_invalid_json_body_is_rejected(client: TestClient) -> None:
    resp = client.post(
        f"{API}/feedback",
        content=b'{"message": ',
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "invalid JSON body"}


def test_admin_create_prepends_article(client: TestClient) -> None:
    resp = client.post(f"{API}/admin/news", json={"title": "X", "url": "http://y"})
    assert resp.status_code == 200
    created = resp.json()["created"]
    assert created["id"].startswith("n") and len(created["id"]) == 7
    assert created["summary"] == ""
    assert created["image"] == ""
    assert created["sourceId"] is None
    assert created["publishedAt"].endswith("Z")

    other = client.post(f"{API}/admin/news", json={"title": "Z", "url": "http://z", "sourceId": "s2"}).json()["created"]
    assert other["id"] != created["id"]

    ids = [n["id"] for n in client.get(f"{API}/news").json()["data"]]
    assert ids[:2] == [other["id"], created["id"]]
    assert ids[2:] == ["n1", "n2"]


def test_admin_create_requires_title_and_url(store: InMemoryStore, client: TestClient) -> None:
    assert client.post(f"{API}/admin/news", json={}).json() == {"error": "title and url required"}
    resp = client.post(f"{API}/admin/news", json={"title": "X"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "url required"}
    assert store.saves == 0


def test_unknown_route_is_generic_404(client: TestClient) -> None:
    for method, path in (("GET", "/nope"), ("GET", f"{API}/nope"), ("DELETE", f"{API}/news"), ("GET", f"{API}/like")):
        resp = client.request(method, path)
        assert resp.status_code == 404
        assert resp.json() == {"error": "not found"}


def test_security_headers_and_cors(client: TestClient) -> None:
    resp = client.get(f"{API}/sources", headers={"Origin": "https://anywhere.example"})
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["x-content-type-options"] == "nosniff"
    assert resp.headers["x-frame-options"] == "SAMEORIGIN"
    assert resp.headers["referrer-policy"] == "no-referrer"
    assert "strict-transport-security" in resp.headers

    missing = client.get(f"{API}/nope")
    assert missing.headers["x-content-type-options"] == "nosniff"


def test_cors_preflight(client: TestClient) -> None:
    resp = client.options(
        f"{API}/like",
        headers={"Origin": "https://anywhere.example", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_oversized_body_is_rejected(store: InMemoryStore, client: TestClient) -> None:
    message = "x" * (1024 * 1024 + 1)
    resp = client.post(
        f"{API}/feedback",
        content=json.dumps({"message": message}).encode("utf-8"),
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 413
    assert resp.json() == {"error": "request entity too large"}
    assert store.saves == 0


def test_corrupt_store_fails_the_request(data_path) -> None:
    data_path.write_text("{not json", encoding="utf-8")
    app.dependency_overrides[get_store] = lambda: JSONFileStore(data_path)
    try:
        # No context manager: startup would fail on the same file.
        client = TestClient(app)
        resp = client.get(f"{API}/news")
        assert resp.status_code == 500
        assert resp.json() == {"error": "storage unavailable"}
        # Health does not read the store.
        assert client.get(f"{API}/health").status_code == 200
    finally:
        app.dependency_overrides.clear()


class _BrokenStore(InMemoryStore):
    def load(self):
        raise RuntimeError("disk gremlins")


def test_unexpected_failure_is_a_json_500() -> None:
    app.dependency_overrides[get_store] = lambda: _BrokenStore()
    try:
        # Startup would fail on the same store, so no context manager.
        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get(f"{API}/news")
        assert resp.status_code == 500
        assert resp.json() == {"error": "internal server error"}
    finally:
        app.dependency_overrides.clear()


def test_startup_seeds_the_data_file(file_client: TestClient, data_path) -> None:
    assert data_path.exists()
    assert json.loads(data_path.read_text(encoding="utf-8"))["news"][0]["id"] == "n1"
