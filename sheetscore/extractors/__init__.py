from typing import Callable, Dict, List

from bs4 import BeautifulSoup

from sheetscore.extractors import assessment, candidate_response
from sheetscore.models import Dialect, RawQuestion

QuestionExtractor = Callable[[BeautifulSoup, str], List[RawQuestion]]

EXTRACTORS: Dict[Dialect, QuestionExtractor] = {
    Dialect.ASSESSMENT_TABLE: assessment.extract_questions,
    Dialect.VIEW_CANDIDATE_RESPONSE: candidate_response.extract_questions,
}


def get_extractor(dialect: Dialect) -> QuestionExtractor:
    return EXTRACTORS[dialect]
