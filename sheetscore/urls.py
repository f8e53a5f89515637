import re
from typing import Optional, Tuple
from urllib.parse import urlparse

from sheetscore import config

ASSET_PATH_RE = re.compile(r"""src=["'](/per/g\d+/pub/\d+/touchstone/)""", re.I)
SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*:", re.I)
LANGUAGE_MARKER_RE = re.compile(r"_(HI|EN)(\.[^./?#]+)(?=$|[?#])", re.I)

_MARKER_SWAP = str.maketrans("HIhiENen", "ENenHIhi")


def host_for(raw_html: str, source_url: Optional[str] = None) -> str:
    if config.RRB_DOMAIN in (source_url or "") or config.RRB_DOMAIN in raw_html:
        return config.RRB_HOST
    return config.SSC_HOST


def extract_base_url(raw_html: str, source_url: Optional[str] = None) -> str:
    host = host_for(raw_html, source_url)
    m = ASSET_PATH_RE.search(raw_html)
    if m:
        return host + m.group(1)
    return host


def resolve_image_url(src: Optional[str], base_url: str) -> Optional[str]:
    src = (src or "").strip()
    if not src:
        return None
    if src.startswith("//"):
        return "https:" + src
    if SCHEME_RE.match(src):
        return src
    if src.startswith("/"):
        parsed = urlparse(base_url)
        return f"{parsed.scheme}://{parsed.netloc}{src}"
    return base_url.rstrip("/") + "/" + src


def bilingual_variants(url: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(hindi, english)`` image URLs derived from a language-marked URL."""
    if not url:
        return None, None
    m = LANGUAGE_MARKER_RE.search(url)
    if not m:
        return None, None
    marker = m.group(1)
    other = marker.translate(_MARKER_SWAP)
    swapped = url[:m.start(1)] + other + url[m.end(1):]
    if marker.upper() == "HI":
        return url, swapped
    return swapped, url
