"""CDN asset URLs and a download proxy for same-origin file downloads."""

from __future__ import annotations

import json
import os
import re
import urllib.request
from urllib.parse import quote, urlparse

DEFAULT_ASSET_BASE_URL = "https://public.emojidir.com"
ALLOWED_ASSET_HOSTS = ("public.emojidir.com", "object.emojidir.com")


def asset_base_url() -> str:
    return os.environ.get("EMOJIDIR_ASSET_BASE_URL", DEFAULT_ASSET_BASE_URL).rstrip("/")


def get_asset_url(path: str, base_url: str | None = None) -> str:
    """Prefix a relative asset path with the CDN base URL."""
    if not path:
        return ""
    if path.startswith(("http://", "https://")):
        return path
    base = (base_url or asset_base_url()).rstrip("/")
    return f"{base}/{quote(path.lstrip('/'), safe='/')}"


def _error(status: int, message: str) -> dict:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"error": message}),
    }


def _attachment_name(filename: str | None, path: str) -> str:
    name = filename or os.path.basename(path) or "emoji"
    name = re.sub(r'["\\\r\n]', "", name).strip()
    return name or "emoji"


def _host_allowed(url: str, allowed_hosts: tuple[str, ...]) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and parsed.hostname in allowed_hosts


def proxy_download(
    url: str | None,
    filename: str | None = None,
    timeout: float = 10,
    allowed_hosts: tuple[str, ...] = ALLOWED_ASSET_HOSTS,
) -> dict:
    """Fetch a remote asset and return it as an attachment response.

    The response is a ``{"statusCode", "headers", "body"}`` dict with the
    raw bytes as body. Failures are reported as JSON error bodies and are
    not retried. A redirect must also land on an allowed host.
    """
    if not url:
        return _error(400, "Missing url parameter")

    if not _host_allowed(url, allowed_hosts):
        return _error(403, "Host not allowed")

    name = _attachment_name(filename, urlparse(url).path)
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            if not _host_allowed(response.geturl(), allowed_hosts):
                return _error(403, "Redirect to a host that is not allowed")
            body = response.read()
            content_type = response.headers.get("Content-Type", "application/octet-stream")
    except (OSError, ValueError) as e:
        return _error(502, f"Download failed: {e}")

    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": content_type,
            "Content-Disposition": f"attachment; filename=\"{name}\"",
            "Content-Length": str(len(body)),
            "Cache-Control": "public, max-age=86400",
        },
        "body": body,
    }
