import json
from pathlib import Path

from fastapi.testclient import TestClient

from license_catalog.config import AppConfig
from license_catalog.main import create_app


def _write_catalog(root: Path) -> None:
    datasets = {
        "licenses": [
            {
                "data": {
                    "name": "GNU General Public License v3.0",
                    "spdx": "GPL-3.0-only",
                    "summary": [{"language": "ja", "text": "コピーレフト"}, {"language": "en", "text": "Copyleft"}],
                    "content": "GNU GENERAL PUBLIC LICENSE",
                    "permissions": [
                        {
                            "actions": [{"ref": "modify"}],
                            "conditionHead": {
                                "type": "AND",
                                "children": [{"type": "LEAF", "ref": "c1"}, {"type": "LEAF", "ref": "c2"}],
                            },
                        }
                    ],
                    "notices": [{"ref": "n1"}],
                }
            },
            {"data": {"name": "MIT", "spdx": "MIT", "permissions": [], "notices": []}},
        ],
        "actions": [{"data": {"id": "modify", "name": [{"language": "en", "text": "Modify"}]}}],
        "conditions": [
            {
                "data": {
                    "id": "c1",
                    "conditionType": "OBLIGATION",
                    "name": [{"language": "en", "text": "Disclose Source"}],
                }
            }
        ],
        "notices": [{"data": {"id": "n1", "description": [{"language": "en", "text": "No warranty"}]}}],
    }
    for name, payload in datasets.items():
        (root / f"{name}.json").write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def _client(data_dir: Path) -> TestClient:
    app = create_app()
    # Override config for test isolation.
    app.state.cfg = AppConfig(data_dir=data_dir)
    return TestClient(app)


def test_health(tmp_path: Path) -> None:
    resp = _client(tmp_path).get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_list_licenses_json(tmp_path: Path) -> None:
    _write_catalog(tmp_path)
    resp = _client(tmp_path).get("/api/licenses")

    assert resp.status_code == 200
    body = resp.json()
    assert body["language"] == "ja"
    assert body["count"] == 2
    gpl, mit = body["licenses"]
    assert gpl["summary"] == "コピーレフト"
    tree = gpl["permissions"][0]["conditions"]
    assert tree["kind"] == "AND"
    assert [c["name"] for c in tree["children"]] == ["Disclose Source"]
    assert mit["permissions"] == []
    assert mit["notices"] == []


def test_language_query_param(tmp_path: Path) -> None:
    _write_catalog(tmp_path)
    body = _client(tmp_path).get("/api/licenses", params={"lang": "en"}).json()
    assert body["language"] == "en"
    assert body["licenses"][0]["summary"] == "Copyleft"


def test_get_single_license(tmp_path: Path) -> None:
    _write_catalog(tmp_path)
    client = _client(tmp_path)

    resp = client.get("/api/licenses/MIT")
    assert resp.status_code == 200
    assert resp.json()["name"] == "MIT"

    resp = client.get("/api/licenses/BSD-3-Clause")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "license_not_found"


def test_load_failure_is_502(tmp_path: Path) -> None:
    _write_catalog(tmp_path)
    (tmp_path / "notices.json").unlink()

    resp = _client(tmp_path).get("/api/licenses")
    assert resp.status_code == 502
    assert resp.json()["detail"].startswith("catalog_load_failed: notices")


def test_html_page_renders_cards(tmp_path: Path) -> None:
    _write_catalog(tmp_path)
    resp = _client(tmp_path).get("/licenses")

    assert resp.status_code == 200
    html = resp.text
    assert "GNU General Public License v3.0" in html
    assert "<h3>Permissions:</h3>" in html
    assert "<h4>Conditions:</h4>" in html
    assert "LEAF (OBLIGATION):</strong> Disclose Source" in html
    assert 'class="condition-leaf" style="margin-left: 20px;"' in html
    assert "<h3>Notices:</h3>" in html
    assert '<pre class="license-content">GNU GENERAL PUBLIC LICENSE</pre>' in html


def test_html_page_load_failure(tmp_path: Path) -> None:
    resp = _client(tmp_path).get("/licenses")
    assert resp.status_code == 502
    assert "Failed to load licenses." in resp.text
    assert "<details" not in resp.text
