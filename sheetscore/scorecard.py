import logging
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

from sheetscore import catalog, config
from sheetscore.candidate import extract_candidate_info
from sheetscore.detect import detect_format
from sheetscore.errors import DocumentParseError
from sheetscore.extractors import get_extractor
from sheetscore.models import CandidateInfo, ExamConfig, QuestionResult, ScorecardData
from sheetscore.scoring import score, score_question
from sheetscore.sections import resolve_section
from sheetscore.urls import extract_base_url

logger = logging.getLogger(__name__)

RRB_SUBJECT_HINTS = ("rrb", "ntpc")
RRB_DEFAULT_EXAM_ID = "RRB_NTPC_CBT1"


def _as_text(raw_html) -> str:
    if isinstance(raw_html, bytes):
        return raw_html.decode("utf-8", errors="ignore")
    if not isinstance(raw_html, str):
        raise DocumentParseError("The response sheet must be HTML text.")
    return raw_html


def parse_document(raw_html) -> BeautifulSoup:
    raw_html = _as_text(raw_html)
    if not raw_html.strip():
        raise DocumentParseError("The response sheet is empty.")
    soup = BeautifulSoup(raw_html, "html.parser")
    if soup.find(True) is None:
        raise DocumentParseError("The response sheet does not contain any HTML markup.")
    return soup


def detect_exam(candidate_info: Optional[CandidateInfo], raw_html: str) -> ExamConfig:
    subject = (candidate_info.subject if candidate_info else "").lower()
    if any(hint in subject for hint in RRB_SUBJECT_HINTS) or config.RRB_DOMAIN in raw_html:
        return catalog.get_exam_config_or_default(RRB_DEFAULT_EXAM_ID)
    return catalog.get_exam_config_or_default(config.DEFAULT_EXAM_ID)


def _resolve_exam(exam_id: Optional[str], candidate_info: Optional[CandidateInfo],
                  raw_html: str, warnings: List[str]) -> ExamConfig:
    if not exam_id:
        return detect_exam(candidate_info, raw_html)
    exam = catalog.get_exam_config(exam_id)
    if exam is None:
        exam = catalog.get_exam_config_or_default(exam_id)
        warnings.append(f"Unknown exam '{exam_id}', scored as {exam.name}.")
    return exam


def build_scorecard(raw_html, exam_id: Optional[str] = None, source_url: Optional[str] = None) -> ScorecardData:
    raw_html = _as_text(raw_html)
    soup = parse_document(raw_html)
    warnings: List[str] = []

    dialect = detect_format(raw_html)
    base_url = extract_base_url(raw_html, source_url)
    candidate_info = extract_candidate_info(soup)
    if candidate_info is None:
        warnings.append("No candidate information found.")

    exam = _resolve_exam(exam_id, candidate_info, raw_html, warnings)
    ranges = catalog.subject_ranges(exam)

    raw_questions = get_extractor(dialect)(soup, base_url)
    questions: Tuple[QuestionResult, ...] = tuple(
        score_question(q, resolve_section(q.sequential_number, ranges)) for q in raw_questions
    )
    if not questions:
        warnings.append("No questions found; the page format may not be supported.")

    summary = score(questions, ranges)
    if summary.unmapped is not None:
        warnings.append(
            f"{summary.unmapped.total_questions} question(s) fall outside the {exam.name} layout."
        )
    logger.info("Scored %d questions (%s, %s): %.2f", len(questions), dialect.value, exam.id, summary.total_score)

    return ScorecardData(
        exam_id=exam.id,
        exam_name=exam.name,
        dialect=dialect,
        base_url=base_url,
        candidate_info=candidate_info,
        sections=summary.sections,
        qualifying_section=summary.qualifying,
        unmapped_section=summary.unmapped,
        questions=questions,
        ranges=ranges,
        total_correct=summary.total_correct,
        total_wrong=summary.total_wrong,
        total_skipped=summary.total_skipped,
        total_bonus=summary.total_bonus,
        total_score=summary.total_score,
        total_max_marks=summary.total_max_marks,
        warnings=tuple(warnings),
    )


def questions_for_section(scorecard: ScorecardData, part: str) -> List[QuestionResult]:
    rng = next((r for r in scorecard.ranges if r.part == part), None)
    if rng is None:
        return []
    return [q for q in scorecard.questions if rng.contains(q.sequential_number)]
