"""Extractor for the flat, colour-coded response sheet.

The page is a run of table rows: a ``Q. No: N`` header row followed by up to five
``N.`` option rows whose background colour carries the answer key (green or
yellow) and the candidate's choice (red).
"""
import logging
import re
from typing import List, Optional, Set, Tuple

from bs4 import BeautifulSoup, Tag

from sheetscore.extractors.common import content_image_url, text_of
from sheetscore.models import RawOption, RawQuestion

logger = logging.getLogger(__name__)

QUESTION_HEADER_RE = re.compile(r"^\s*Q\.\s*(?:No\.?\s*:?\s*)?(\d+)\s*[:.)-]?\s*", re.I)
OPTION_ROW_RE = re.compile(r"^\s*(\d+)\.\s*")
BACKGROUND_RE = re.compile(r"background(?:-color)?\s*:\s*([^;]+)", re.I)
MAX_OPTIONS = 5

CORRECT = "correct"
CHOSEN = "chosen"


def leaf_rows(soup: BeautifulSoup) -> List[Tag]:
    return [tr for tr in soup.find_all("tr") if tr.find("tr") is None]


def _backgrounds(tag: Tag) -> List[str]:
    found = []
    if tag.get("bgcolor"):
        found.append(tag["bgcolor"].strip().lower())
    m = BACKGROUND_RE.search(tag.get("style") or "")
    if m:
        found.append(m.group(1).strip().lower())
    return found


def row_flags(row: Tag) -> Set[str]:
    flags = set()
    for tag in [row] + row.find_all(["td", "th"]):
        for colour in _backgrounds(tag):
            if "green" in colour or "yellow" in colour:
                flags.add(CORRECT)
            elif "red" in colour:
                flags.add(CHOSEN)
    return flags


def infer_chosen_from_correct(chosen: Optional[int], correct: Optional[int]) -> Tuple[Optional[int], bool]:
    """Treat the highlighted key as the candidate's answer when no row is red.

    Some renderings only colour the correct row when the candidate picked it.
    Whether an unattempted question can look the same is unresolved, so callers
    keep the returned flag on the question.
    """
    if chosen is None and correct is not None:
        return correct, True
    return chosen, False


def _header_number(row: Tag) -> Optional[int]:
    first = row.find(["td", "th"])
    m = QUESTION_HEADER_RE.match(text_of(first))
    return int(m.group(1)) if m else None


def _build_question(sequential_number: int, local_number: int, header: Tag,
                    option_rows: List[Tag], base_url: str) -> RawQuestion:
    parsed = []
    chosen = correct = None
    for row in option_rows:
        text = text_of(row)
        m = OPTION_ROW_RE.match(text)
        number = int(m.group(1))
        flags = row_flags(row)
        if CORRECT in flags and correct is None:
            correct = number
        if CHOSEN in flags and chosen is None:
            chosen = number
        parsed.append((number, text[m.end():].strip() or None, content_image_url(row, base_url, require_name=False)))

    chosen, inferred = infer_chosen_from_correct(chosen, correct)
    if inferred:
        logger.debug("Question %d: no chosen row, assuming key option %d", sequential_number, correct)

    options = tuple(
        RawOption(
            option_number=number,
            image_url=image_url,
            text=text,
            is_correct=number == correct,
            is_chosen=number == chosen,
        )
        for number, text, image_url in parsed
    )
    header_text = QUESTION_HEADER_RE.sub("", text_of(header), count=1).strip()
    return RawQuestion(
        sequential_number=sequential_number,
        section_local_number=local_number,
        chosen_option=chosen,
        chosen_option_inferred=inferred,
        correct_option=correct,
        question_text=header_text or None,
        image_url=content_image_url(header, base_url, require_name=False),
        options=options,
    )


def extract_questions(soup: BeautifulSoup, base_url: str) -> List[RawQuestion]:
    rows = leaf_rows(soup)
    questions: List[RawQuestion] = []
    i = 0
    while i < len(rows):
        local_number = _header_number(rows[i])
        if local_number is None:
            i += 1
            continue
        option_rows = []
        j = i + 1
        while j < len(rows) and len(option_rows) < MAX_OPTIONS and OPTION_ROW_RE.match(text_of(rows[j])):
            option_rows.append(rows[j])
            j += 1
        if not option_rows:
            logger.warning("Skipping question header %r without option rows", text_of(rows[i]))
            i = j
            continue
        questions.append(_build_question(len(questions) + 1, local_number, rows[i], option_rows, base_url))
        i = j
    return questions
