from sheetscore.errors import (
    DocumentParseError,
    FetchError,
    InvalidRequestError,
    NoQuestionsFoundError,
    ScorecardError,
)
from sheetscore.models import Dialect, QuestionStatus, ScorecardData
from sheetscore.scorecard import build_scorecard, questions_for_section
from sheetscore.service import analyze

__all__ = [
    "DocumentParseError",
    "FetchError",
    "InvalidRequestError",
    "NoQuestionsFoundError",
    "ScorecardError",
    "Dialect",
    "QuestionStatus",
    "ScorecardData",
    "build_scorecard",
    "questions_for_section",
    "analyze",
]
