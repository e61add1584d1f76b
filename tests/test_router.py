"""Tests API FastAPI — endpoints /email-builder/* + /health."""
import pytest
from fastapi.testclient import TestClient

from email_builder.fastapi_integration import create_app

DOCUMENT = {
    "subject": "Hello",
    "blocks": [
        {"id": "b1", "blockType": "text", "orderId": 2, "content": {"text": "Hello"}},
        {"id": "b2", "blockType": "header", "orderId": 1, "content": {"text": "Acme"}},
    ],
}


@pytest.fixture(scope="module")
def client():
    return TestClient(create_app())


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# ── /render ──────────────────────────────────────────────────────────────────

def test_render_returns_html(client):
    resp = client.post("/email-builder/render", json=DOCUMENT)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.text.index('data-block-id="b2"') < resp.text.index('data-block-id="b1"')


def test_render_invalid_document_is_422(client):
    resp = client.post("/email-builder/render", json={"blocks": "nope"})
    assert resp.status_code == 422
    assert "detail" in resp.json()


# ── /parse ───────────────────────────────────────────────────────────────────

def test_parse_returns_document_json(client):
    html = client.post("/email-builder/render", json=DOCUMENT).text
    resp = client.post("/email-builder/parse", json={"html": html})
    assert resp.status_code == 200
    data = resp.json()
    assert [b["id"] for b in data["blocks"]] == ["b2", "b1"]
    assert data["blocks"][0]["blockType"] == "header"
    assert data["metadata"]["noBlocksFound"] is False


def test_parse_no_blocks(client):
    resp = client.post("/email-builder/parse", json={"html": "<html><body>not a real email</body></html>"})
    assert resp.status_code == 200
    assert resp.json()["blocks"] == []
    assert resp.json()["metadata"]["noBlocksFound"] is True


def test_parse_requires_html_field(client):
    assert client.post("/email-builder/parse", json={}).status_code == 422


# ── /validate ────────────────────────────────────────────────────────────────

def test_validate_reports_errors(client):
    resp = client.post("/email-builder/validate", json={"blocks": [
        {"id": "i", "blockType": "image", "orderId": 1},
        {"id": "j", "blockType": "text", "orderId": 1, "content": {"text": "x"}},
    ]})
    assert resp.status_code == 200
    data = resp.json()
    assert data["isValid"] is False
    assert {e["field"] for e in data["errors"]} == {"imageUrl", "orderId"}
    assert data["warnings"][0]["blockId"] == "i"


def test_validate_ok(client):
    resp = client.post("/email-builder/validate", json=DOCUMENT)
    assert resp.json() == {"isValid": True, "errors": [], "warnings": []}


# ── /export ──────────────────────────────────────────────────────────────────

def test_export_strips_block_attributes(client):
    html = client.post("/email-builder/render", json=DOCUMENT).text
    resp = client.post("/email-builder/export", json={"html": html, "includeStyles": False})
    assert resp.status_code == 200
    assert "data-block-id" not in resp.text
    assert "mso-table-lspace" not in resp.text


# ── /catalog ─────────────────────────────────────────────────────────────────

def test_catalog_lists_block_types(client):
    resp = client.get("/email-builder/catalog")
    assert resp.status_code == 200
    blocks = resp.json()["blocks"]
    assert [b["blockType"] for b in blocks] == [
        "header", "hero", "text", "image", "button", "divider", "footer", "features",
    ]
    hero_schema = next(b["schema"] for b in blocks if b["blockType"] == "hero")
    assert "orderId" in hero_schema["properties"]
