import logging
import re

from sheetscore.models import Dialect

logger = logging.getLogger(__name__)

# Dialect A marks answer cells with CSS classes inside per-question sub-tables.
ASSESSMENT_FINGERPRINTS = (
    re.compile(r"""class=["'][^"']*\brightAns\b""", re.I),
    re.compile(r"""class=["'][^"']*\bquestionRowTbl\b""", re.I),
    re.compile(r"""class=["'][^"']*\bmenu-tbl\b""", re.I),
)
# Dialect B colours whole option rows and prints "Q. No: N" row headers.
VIEW_RESPONSE_FINGERPRINTS = (
    re.compile(r"""bgcolor=["']?\s*(?:green|yellow|red)\b""", re.I),
    re.compile(r"""background(?:-color)?\s*:\s*(?:green|yellow|red)\b""", re.I),
)
QUESTION_ROW_RE = re.compile(r">\s*Q\.\s*(?:No\.?\s*:?\s*)?\d+", re.I)


def detect_format(raw_html: str) -> Dialect:
    if any(p.search(raw_html) for p in ASSESSMENT_FINGERPRINTS):
        return Dialect.ASSESSMENT_TABLE
    coloured = any(p.search(raw_html) for p in VIEW_RESPONSE_FINGERPRINTS)
    if coloured and QUESTION_ROW_RE.search(raw_html):
        return Dialect.VIEW_CANDIDATE_RESPONSE
    logger.debug("No dialect fingerprint found, assuming %s", Dialect.ASSESSMENT_TABLE.value)
    return Dialect.ASSESSMENT_TABLE
