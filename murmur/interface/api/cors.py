"""CORS origin allow-list.

``ALLOW_SITES`` holds comma-separated entries, each either an exact origin
(``https://blog.example.com``) or a bare domain (``example.com``), which
admits the domain over both http and https. Unset or ``*`` reflects any
origin.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

ALLOW_METHODS = ["GET", "POST", "OPTIONS", "DELETE"]
ALLOW_HEADERS = [
    "Content-Type",
    "Authorization",
    "cf-access-jwt-assertion",
    "x-admin-token",
]
EXPOSE_HEADERS = ["Content-Length", "Last-Modified"]


def parse_allow_sites(raw: str | None) -> list[str] | None:
    """Expand the allow-list into exact origins.

    Returns:
        Allowed origins, or None when every origin is allowed
    """
    if raw is None or not raw.strip() or raw.strip() == "*":
        return None

    origins: list[str] = []
    for entry in raw.split(","):
        site = entry.strip().rstrip("/")
        if not site:
            continue
        if site.startswith(("http://", "https://")):
            candidates = [site]
        else:
            candidates = [f"http://{site}", f"https://{site}"]
        origins.extend(c for c in candidates if c not in origins)
    return origins


def setup_cors(app: FastAPI, allow_sites: str | None) -> None:
    """Install the CORS middleware.

    Args:
        app: FastAPI application
        allow_sites: Raw ``ALLOW_SITES`` value
    """
    origins = parse_allow_sites(allow_sites)
    if origins is None:
        # Permissive fallback: echo the caller's origin back
        origin_settings = {"allow_origin_regex": ".*"}
    else:
        origin_settings = {"allow_origins": origins}

    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_methods=ALLOW_METHODS,
        allow_headers=ALLOW_HEADERS,
        expose_headers=EXPOSE_HEADERS,
        max_age=600,
        **origin_settings,
    )
