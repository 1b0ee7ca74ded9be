"""
HTTP API 测试
"""

import pytest
from fastapi.testclient import TestClient

from hanpin.api import server
from hanpin.api.server import app


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


class TestHealth:
    """健康检查"""

    def test_health(self, client):
        from hanpin import __version__
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy", "version": __version__}

    def test_request_headers(self, client):
        resp = client.get("/health")
        assert "X-Request-ID" in resp.headers
        assert resp.headers["X-Response-Time"].endswith("ms")


class TestConvertStatement:
    """POST /pinyin"""

    def test_default_format(self, client):
        resp = client.post("/pinyin", json={"text": "重庆人。", "separator": "-"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["pinyin"] == "chóng-qìngrén。"
        assert data["segments"] == [
            {"text": "重庆", "matched": True, "pinyin": ["chóng", "qìng"]},
            {"text": "人", "matched": False, "pinyin": ["rén"]},
            {"text": "。", "matched": False, "pinyin": ["。"]},
        ]

    def test_tone_number(self, client):
        resp = client.post("/pinyin", json={"text": "银行", "format": "tone_number"})
        assert resp.status_code == 200
        assert resp.json()["pinyin"] == "yin2 hang2"

    def test_empty_text(self, client):
        resp = client.post("/pinyin", json={"text": ""})
        assert resp.status_code == 400

    def test_bad_format(self, client):
        resp = client.post("/pinyin", json={"text": "中", "format": "ipa"})
        assert resp.status_code == 422


class TestConvertCharacter:
    """GET /pinyin/char"""

    def test_multi(self, client):
        resp = client.get("/pinyin/char", params={"c": "重"})
        assert resp.status_code == 200
        assert resp.json() == {"char": "重", "pinyin": ["zhòng", "chóng"], "multi": True}

    def test_no_tone(self, client):
        resp = client.get("/pinyin/char", params={"c": "吗", "format": "no_tone"})
        assert resp.json()["pinyin"] == ["ma"]

    def test_unknown(self, client):
        resp = client.get("/pinyin/char", params={"c": "a"})
        assert resp.json() == {"char": "a", "pinyin": [], "multi": False}

    def test_not_single_char(self, client):
        resp = client.get("/pinyin/char", params={"c": "重庆"})
        assert resp.status_code == 400


def test_not_ready(monkeypatch):
    """转换器未初始化时返回 503"""
    monkeypatch.setattr(server, "converter", None)
    c = TestClient(app)
    assert c.get("/pinyin/char", params={"c": "重"}).status_code == 503
    assert c.get("/health").json()["status"] == "not_ready"
