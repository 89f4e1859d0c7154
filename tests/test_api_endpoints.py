from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import app
from app.api.routes import screenshots as screenshot_routes
from app.api.routes import slides as slide_routes


PNG_BYTES = b"\x89PNG\r\n\x1a\nstub"


class StubRenderer:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.screenshots: list[tuple[str, int]] = []
        self.pdfs: list = []

    async def capture_screenshot(self, url: str, timeout_ms: int) -> bytes:
        self.screenshots.append((url, timeout_ms))
        if self.fail:
            raise TimeoutError("navigation timed out")
        return PNG_BYTES

    async def render_to_pdf(self, html, viewport, options) -> bytes:
        self.pdfs.append((html, viewport, options))
        if self.fail:
            raise RuntimeError("renderer crashed")
        return b"%PDF-1.4 stub"


def _client(monkeypatch, stub: StubRenderer) -> TestClient:
    monkeypatch.setattr(screenshot_routes, "get_renderer", lambda: stub)
    monkeypatch.setattr(slide_routes, "get_renderer", lambda: stub)
    return TestClient(app)


def test_index_form():
    resp = TestClient(app).get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert 'action="/screenshot"' in resp.text


def test_health():
    resp = TestClient(app).get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_screenshot_rejects_bad_scheme(monkeypatch):
    stub = StubRenderer()
    client = _client(monkeypatch, stub)
    for url in ["ftp://x", "http://", "HTTP://example.com", "example.com", ""]:
        resp = client.post("/screenshot", data={"url": url})
        assert resp.status_code == 400, url
        assert resp.text == "Invalid URL."
        assert resp.headers["content-type"].startswith("text/plain")
    assert stub.screenshots == []


def test_screenshot_missing_field(monkeypatch):
    client = _client(monkeypatch, StubRenderer())
    resp = client.post("/screenshot", data={})
    assert resp.status_code == 400
    assert resp.text == "Invalid URL."


def test_screenshot_success(monkeypatch):
    stub = StubRenderer()
    client = _client(monkeypatch, stub)
    resp = client.post("/screenshot", data={"url": "http://example.com"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "data:image/png;base64,iVBORw0KGgpzdHVi" in resp.text
    assert stub.screenshots == [("http://example.com", 60000)]


def test_screenshot_multipart_form(monkeypatch):
    client = _client(monkeypatch, StubRenderer())
    resp = client.post("/screenshot", files={"url": (None, "https://example.com")})
    assert resp.status_code == 200


def test_screenshot_renderer_failure(monkeypatch, caplog):
    client = _client(monkeypatch, StubRenderer(fail=True))
    resp = client.post("/screenshot", data={"url": "https://example.com"})
    assert resp.status_code == 500
    assert resp.text == "Failed to generate screenshot."
    assert "navigation timed out" not in resp.text
    assert any("navigation timed out" in rec.getMessage() for rec in caplog.records)


def test_slides_rejects_invalid_payloads(monkeypatch):
    stub = StubRenderer()
    client = _client(monkeypatch, stub)
    for payload in [{}, {"slides": []}, {"slides": "<div>a</div>"}, {"slides": [1, 2]}, {"slides": None}, ["x"]]:
        resp = client.post("/slides", json=payload)
        assert resp.status_code == 400, payload
        assert resp.json() == {"error": "No slides provided or invalid format"}
    assert stub.pdfs == []


def test_slides_rejects_malformed_json(monkeypatch):
    client = _client(monkeypatch, StubRenderer())
    resp = client.post("/slides", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No slides provided or invalid format"}


def test_slides_success_returns_odd_pages_pdf(monkeypatch):
    stub = StubRenderer()
    client = _client(monkeypatch, stub)
    resp = client.post("/slides", json={"slides": ["<div>a</div>", "<div>b</div>", "<div>c</div>"]})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.headers["content-disposition"] == 'attachment; filename="ai_slides.pdf"'
    assert resp.content == b"%PDF-1.4 stub"
    assert len(stub.pdfs) == 1
    _, _, options = stub.pdfs[0]
    assert options.page_ranges == "1,3"


def test_slides_render_failure(monkeypatch):
    client = _client(monkeypatch, StubRenderer(fail=True))
    resp = client.post("/slides", json={"slides": ["<div>a</div>"]})
    assert resp.status_code == 500
    assert resp.json() == {"error": "An error occurred while generating the PDF"}


def test_unknown_route_returns_json_404():
    resp = TestClient(app).get("/nope")
    assert resp.status_code == 404
    assert resp.json()["error_type"] == "not_found"


def test_slides_rejects_deeply_nested_json(monkeypatch):
    stub = StubRenderer()
    client = _client(monkeypatch, stub)
    body = '{"slides": ' + "[" * 100000 + "]" * 100000 + "}"
    resp = client.post("/slides", content=body.encode(), headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No slides provided or invalid format"}
    assert stub.pdfs == []
