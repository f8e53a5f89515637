import re
from typing import Optional

from bs4 import Tag

from sheetscore.urls import resolve_image_url

LEADING_INT_RE = re.compile(r"^\s*(-?\d+)")
GLYPH_SRC_RE = re.compile(r"(?:^|[/_-])(tick|cross|right|wrong|correct|incorrect|check)[^/]*\.\w+(?:$|[?#])", re.I)


def leading_int(text: str) -> Optional[int]:
    m = LEADING_INT_RE.match(text or "")
    return int(m.group(1)) if m else None


def positive_option(text: str) -> Optional[int]:
    """Option number from a label value; ``None`` for ``--``, 0 or negatives."""
    value = leading_int(text)
    if value is None or value <= 0:
        return None
    return value


def text_of(tag: Optional[Tag]) -> str:
    if tag is None:
        return ""
    return tag.get_text(" ", strip=True)


def is_glyph(src: Optional[str]) -> bool:
    return bool(GLYPH_SRC_RE.search(src or ""))


def content_image_url(tag: Tag, base_url: str, require_name: bool = True) -> Optional[str]:
    # Tick/cross glyphs carry no name attribute, content images do.
    img = tag.find("img", attrs={"name": True})
    if img is None and not require_name:
        img = next((i for i in tag.find_all("img", src=True) if not is_glyph(i["src"])), None)
    if img is None:
        return None
    return resolve_image_url(img.get("src"), base_url)
