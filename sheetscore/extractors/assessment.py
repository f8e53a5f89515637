"""Extractor for the tabular response sheet (one ``td.rw`` cell per question).

Each question cell nests a ``table.questionRowTbl`` holding the question and its
``rightAns`` / ``wrngAns`` option cells, and a ``table.menu-tbl`` holding the
status and the chosen option.
"""
import logging
import re
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from sheetscore.extractors.common import content_image_url, positive_option, text_of
from sheetscore.models import RawOption, RawQuestion
from sheetscore.urls import resolve_image_url

logger = logging.getLogger(__name__)

LOCAL_NUMBER_RE = re.compile(r"Q\.\s*(\d+)")
OPTION_PREFIX_RE = re.compile(r"^(\d+)\.\s*")
LEFT_ALIGNED_RE = re.compile(r"text-align\s*:\s*left", re.I)


def _local_number(question_tbl: Tag) -> int:
    cell = question_tbl.find("td", class_="bold", valign="top")
    m = LOCAL_NUMBER_RE.search(text_of(cell))
    return int(m.group(1)) if m else 0


def _question_body(question_tbl: Tag, base_url: str) -> Tuple[Optional[str], Optional[str]]:
    cell = question_tbl.find("td", class_="bold", style=LEFT_ALIGNED_RE)
    if cell is None:
        return None, None
    img = cell.find("img")
    image_url = resolve_image_url(img.get("src"), base_url) if img is not None else None
    return text_of(cell) or None, image_url


def _read_menu(menu_tbl: Tag) -> Tuple[str, Optional[int]]:
    status, chosen = "", None
    for tr in menu_tbl.find_all("tr"):
        tds = tr.find_all("td")
        if len(tds) < 2:
            continue
        label, value = text_of(tds[0]), text_of(tds[1])
        if "Status" in label:
            status = value
        elif "Chosen Option" in label:
            chosen = positive_option(value)
    return status, chosen


def _read_options(question_tbl: Tag, chosen: Optional[int], base_url: str) -> Tuple[List[RawOption], Optional[int]]:
    options: List[RawOption] = []
    correct = None
    for td in question_tbl.select("td.rightAns, td.wrngAns"):
        full = text_of(td)
        m = OPTION_PREFIX_RE.match(full)
        if not m:
            continue
        number = int(m.group(1))
        is_right = "rightAns" in (td.get("class") or [])
        if is_right and correct is None:
            correct = number
        options.append(RawOption(
            option_number=number,
            image_url=content_image_url(td, base_url),
            text=full[m.end():].strip() or None,
            is_correct=is_right,
            is_chosen=chosen == number,
        ))
    return options, correct


def parse_question_cell(cell: Tag, sequential_number: int, base_url: str) -> Optional[RawQuestion]:
    question_tbl = cell.find("table", class_="questionRowTbl")
    menu_tbl = cell.find("table", class_="menu-tbl")
    if question_tbl is None or menu_tbl is None:
        logger.debug("Skipping question cell without question/menu tables")
        return None

    text, image_url = _question_body(question_tbl, base_url)
    status, chosen = _read_menu(menu_tbl)
    options, correct = _read_options(question_tbl, chosen, base_url)
    if not options:
        logger.warning("Skipping question cell %r without option cells", text_of(question_tbl)[:40])
        return None

    return RawQuestion(
        sequential_number=sequential_number,
        section_local_number=_local_number(question_tbl),
        status_label=status,
        chosen_option=chosen,
        correct_option=correct,
        question_text=text,
        image_url=image_url,
        options=tuple(options),
    )


def extract_questions(soup: BeautifulSoup, base_url: str) -> List[RawQuestion]:
    questions: List[RawQuestion] = []
    for cell in soup.select("td.rw"):
        question = parse_question_cell(cell, len(questions) + 1, base_url)
        if question is None:
            continue
        questions.append(question)
    return questions
