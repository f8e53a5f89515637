import logging
from typing import Optional

from sheetscore.errors import FetchError, InvalidRequestError, NoQuestionsFoundError
from sheetscore.fetch import fetch_response_sheet
from sheetscore.models import ScorecardData
from sheetscore.scorecard import build_scorecard

logger = logging.getLogger(__name__)


def analyze(url: Optional[str] = None, html: Optional[str] = None, exam_id: Optional[str] = None,
            session=None) -> ScorecardData:
    """Fetch (when only a URL is given) and score one response sheet."""
    for name, value in (("url", url), ("html", html), ("exam_id", exam_id)):
        if value is not None and not isinstance(value, str):
            raise InvalidRequestError(f"'{name}' must be a string")
    if not (html and html.strip()) and not (url and url.strip()):
        raise InvalidRequestError("URL or HTML is required")

    if not (html and html.strip()):
        fetched = fetch_response_sheet(url, session)
        if not fetched.success:
            raise FetchError(fetched.error or "Failed to fetch")
        html = fetched.html

    scorecard = build_scorecard(html, exam_id=exam_id, source_url=url)
    if not scorecard.questions:
        raise NoQuestionsFoundError()
    return scorecard
