import json
import urllib.error

import pytest

from emojidir.assets import get_asset_url, proxy_download


class FakeResponse:
    def __init__(self, body, content_type="image/png", url="https://public.emojidir.com/a.png"):
        self.body = body
        self.headers = {"Content-Type": content_type}
        self.url = url

    def geturl(self):
        return self.url

    def read(self):
        return self.body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_asset_url_prefixes_base():
    assert get_asset_url("assets/dog-face/Flat/dog.svg", "https://cdn.example.com/") == (
        "https://cdn.example.com/assets/dog-face/Flat/dog.svg"
    )
    assert get_asset_url("/assets/a.png", "https://cdn.example.com") == "https://cdn.example.com/assets/a.png"


def test_asset_url_quotes_spaces():
    assert get_asset_url("assets/x/High Contrast/x.svg", "https://cdn.example.com") == (
        "https://cdn.example.com/assets/x/High%20Contrast/x.svg"
    )


def test_asset_url_passthrough_and_empty():
    assert get_asset_url("https://other.example.com/a.png") == "https://other.example.com/a.png"
    assert get_asset_url("") == ""


def test_asset_url_base_from_environment(monkeypatch):
    monkeypatch.setenv("EMOJIDIR_ASSET_BASE_URL", "https://env.example.com/")
    assert get_asset_url("a.png") == "https://env.example.com/a.png"


def test_proxy_requires_url():
    assert proxy_download(None)["statusCode"] == 400


@pytest.mark.parametrize("url", ["https://evil.example.com/a.png", "file:///etc/passwd", "ftp://public.emojidir.com/a"])
def test_proxy_rejects_other_hosts(url):
    assert proxy_download(url)["statusCode"] == 403


def test_proxy_streams_asset_as_attachment(monkeypatch):
    requested = []

    def fake_urlopen(url, timeout):
        requested.append((url, timeout))
        return FakeResponse(b"\x89PNG")

    monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)
    response = proxy_download("https://public.emojidir.com/assets/dog-face/3D/dog_face_3d.png", timeout=5)

    assert requested == [("https://public.emojidir.com/assets/dog-face/3D/dog_face_3d.png", 5)]
    assert response["statusCode"] == 200
    assert response["body"] == b"\x89PNG"
    assert response["headers"]["Content-Type"] == "image/png"
    assert response["headers"]["Content-Disposition"] == 'attachment; filename="dog_face_3d.png"'
    assert response["headers"]["Content-Length"] == "4"


def test_proxy_reports_fetch_failure(monkeypatch):
    def failing_urlopen(url, timeout):
        raise urllib.error.URLError("connection refused")

    monkeypatch.setattr("urllib.request.urlopen", failing_urlopen)
    response = proxy_download("https://object.emojidir.com/a.png", filename="dog.png")

    assert response["statusCode"] == 502
    assert "connection refused" in json.loads(response["body"])["error"]


def test_proxy_strips_header_breaking_characters_from_filename(monkeypatch):
    monkeypatch.setattr("urllib.request.urlopen", lambda url, timeout: FakeResponse(b"png"))
    response = proxy_download("https://public.emojidir.com/a.png", filename='dog"\r\nX-Injected: 1.png')

    disposition = response["headers"]["Content-Disposition"]
    assert disposition == 'attachment; filename="dogX-Injected: 1.png"'
    assert "\r" not in disposition and "\n" not in disposition


def test_proxy_rejects_redirect_to_other_host(monkeypatch):
    monkeypatch.setattr(
        "urllib.request.urlopen",
        lambda url, timeout: FakeResponse(b"secret", url="https://evil.example.com/a.png"),
    )
    response = proxy_download("https://public.emojidir.com/a.png")

    assert response["statusCode"] == 403
    assert response["body"] != b"secret"
