"""Automatic client logo lookup based on the website field.

The lookup service returns an image for ``/<domain>``; the URL itself is
stored in the form and embedded as an image source, so no HTTP request is
made here. Anything that does not look like a domain is skipped without
telling the user. The logo is optional.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import quote, urlencode

from config import LOGO_LOOKUP_BASE_URL, LOGO_LOOKUP_SIZE

log = logging.getLogger(__name__)

LogoLookup = Callable[[str, str], str]

_SCHEME = re.compile(r"^https?://", re.IGNORECASE)
_WWW = re.compile(r"^www\.", re.IGNORECASE)
_PATH_OR_QUERY = re.compile(r"[/?]")
# Earlier builds stored lookups made with an empty domain, e.g.
# "https://img.logo.dev/?token=...". They never resolve to an image.
STALE_LOGO_URL = re.compile(r"^" + re.escape(LOGO_LOOKUP_BASE_URL) + r"/(?:\?.*)?$")


def extract_domain(website: str) -> str:
    """Reduce a website entry such as ``https://www.Acme.com/about`` to ``acme.com``."""

    text = _SCHEME.sub("", (website or "").strip(), count=1)
    text = _WWW.sub("", text, count=1)
    return _PATH_OR_QUERY.split(text, maxsplit=1)[0].lower()


def is_valid_domain(domain: str) -> bool:
    return "." in domain and len(domain) >= 4 and not domain.startswith(".") and not domain.endswith(".")


def should_lookup(website: str, existing_logo_url: str) -> bool:
    """Only fill an empty logo field, and only when a website was entered."""
    return bool((website or "").strip()) and not (existing_logo_url or "").strip()


def build_logo_url(domain: str, api_key: str, size: int = LOGO_LOOKUP_SIZE) -> str:
    query = urlencode({"token": api_key, "size": size})
    return f"{LOGO_LOOKUP_BASE_URL}/{quote(domain)}?{query}"


def resolve_logo_url(
    website: str,
    existing_logo_url: str,
    *,
    api_key: str,
    lookup: LogoLookup = build_logo_url,
) -> Optional[str]:
    """Return the logo URL to store for *website*, or ``None`` to leave the field alone."""

    if not should_lookup(website, existing_logo_url):
        return None
    domain = extract_domain(website)
    if not is_valid_domain(domain):
        log.debug("Skipping logo lookup, %r is not a usable domain", domain)
        return None
    if not api_key:
        log.info("Skipping logo lookup for %s: LOGO_DEV_API_KEY is not set", domain)
        return None
    return lookup(domain, api_key)


def clear_stale_logo_url(snapshot: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop a stored client logo URL that was looked up with an empty domain.

    Applied once while loading a saved form. Other logo URLs, even broken
    ones, are kept as the user entered them.
    """

    cleaned = dict(snapshot)
    logo_url = cleaned.get("client_logo_url")
    if isinstance(logo_url, str) and STALE_LOGO_URL.match(logo_url.strip()):
        log.info("Clearing stale client logo URL from saved form")
        cleaned["client_logo_url"] = ""
    return cleaned


__all__ = [
    "LogoLookup",
    "STALE_LOGO_URL",
    "build_logo_url",
    "clear_stale_logo_url",
    "extract_domain",
    "is_valid_domain",
    "resolve_logo_url",
    "should_lookup",
]
