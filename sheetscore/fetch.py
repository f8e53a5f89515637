import logging
import re
from typing import Callable, List, Optional
from urllib.parse import quote

import requests

from sheetscore import config
from sheetscore.errors import FetchError
from sheetscore.models import FetchResult

logger = logging.getLogger(__name__)

FETCH_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}
PROXY_HEADERS = {"Accept": "text/html"}

PROXY_ROUTES: List[Callable[[str], str]] = [
    lambda url: f"https://api.allorigins.win/raw?url={quote(url, safe='')}",
    lambda url: f"https://corsproxy.io/?{quote(url, safe='')}",
    lambda url: f"https://thingproxy.freeboard.io/fetch/{url}",
]

MULTI_PART_RE = re.compile(r"ViewCandResponse\.aspx", re.I)


def _try_get(url: str, headers: dict, session=None) -> Optional[str]:
    getter = session or requests
    try:
        res = getter.get(url, headers=headers, timeout=config.FETCH_TIMEOUT)
    except requests.RequestException as exc:
        logger.info("Fetch failed for %s: %s", url, exc)
        return None
    if not res.ok:
        logger.info("Fetch of %s returned HTTP %s", url, res.status_code)
        return None
    text = res.text
    if len(text) <= config.MIN_BODY_LENGTH:
        logger.info("Fetch of %s returned a short body (%d chars)", url, len(text))
        return None
    return text


def fetch_with_fallback(url: str, session=None) -> str:
    html = _try_get(url, FETCH_HEADERS, session)
    if html is not None:
        return html
    for route in PROXY_ROUTES:
        html = _try_get(route(url), PROXY_HEADERS, session)
        if html is not None:
            return html
    raise FetchError("Failed to fetch URL after all attempts")


def is_multi_part_url(url: str) -> bool:
    return "viewcandresponse" in url.lower()


def multi_part_urls(url: str) -> List[str]:
    urls = [url]
    for i in range(2, config.MAX_PARTS + 1):
        part_url = MULTI_PART_RE.sub(f"ViewCandResponse{i}.aspx", url)
        if part_url != url:
            urls.append(part_url)
    return urls


def fetch_multi_part(url: str, session=None) -> str:
    parts: List[str] = []
    for part_url in multi_part_urls(url):
        try:
            html = fetch_with_fallback(part_url, session)
        except FetchError:
            break
        if len(html) <= config.MIN_PART_LENGTH:
            break
        parts.append(html)
    if not parts:
        raise FetchError("Failed to fetch any parts")
    logger.info("Fetched %d part(s) for %s", len(parts), url)
    return config.PART_SEPARATOR.join(parts)


def validate_url(url: str) -> Optional[str]:
    if not url or not url.strip():
        return "URL is required"
    if "digialm.com" not in url and ".html" not in url:
        return "Only digialm URLs or .html answer key URLs are supported"
    return None


def fetch_response_sheet(url: str, session=None) -> FetchResult:
    error = validate_url(url)
    if error:
        return FetchResult(success=False, error=error)
    url = url.strip()
    logger.info("Fetching URL: %s", url)
    try:
        if is_multi_part_url(url):
            html = fetch_multi_part(url, session)
        else:
            html = fetch_with_fallback(url, session)
    except FetchError as exc:
        return FetchResult(success=False, error=str(exc))
    logger.info("Fetched HTML length: %d", len(html))
    return FetchResult(success=True, html=html)
