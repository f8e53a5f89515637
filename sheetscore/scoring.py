import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from sheetscore import config
from sheetscore.models import (
    ExamSectionRange,
    QuestionResult,
    QuestionStatus,
    RawQuestion,
    ScoreSummary,
    SectionAssignment,
    SectionResult,
)
from sheetscore.sections import UNKNOWN_PART
from sheetscore.urls import bilingual_variants

logger = logging.getLogger(__name__)


def round_marks(value: float) -> float:
    quantum = Decimal(1).scaleb(-config.SCORE_PRECISION)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def question_status(chosen: Optional[int], correct: Optional[int]) -> QuestionStatus:
    if correct is None:
        return QuestionStatus.BONUS
    if chosen is None:
        return QuestionStatus.UNATTEMPTED
    if chosen == correct:
        return QuestionStatus.CORRECT
    return QuestionStatus.WRONG


def marks_for(status: QuestionStatus, correct_marks: float, negative_marks: float) -> float:
    if status in (QuestionStatus.CORRECT, QuestionStatus.BONUS):
        return correct_marks
    if status == QuestionStatus.WRONG:
        return -negative_marks
    return 0.0


def score_question(raw: RawQuestion, section: SectionAssignment) -> QuestionResult:
    status = question_status(raw.chosen_option, raw.correct_option)
    hindi, english = bilingual_variants(raw.image_url)
    return QuestionResult(
        **raw.model_dump(),
        part=section.part,
        subject=section.subject,
        status=status,
        marks_awarded=marks_for(status, section.correct_marks, section.negative_marks),
        image_url_hindi=hindi,
        image_url_english=english,
    )


def section_score(correct: int, wrong: int, bonus: int, correct_marks: float, negative_marks: float) -> float:
    return round_marks(correct * correct_marks + bonus * correct_marks - wrong * negative_marks)


def _counts(questions: Iterable[QuestionResult]) -> Dict[QuestionStatus, int]:
    counts = {status: 0 for status in QuestionStatus}
    for q in questions:
        counts[q.status] += 1
    return counts


def _tally(rng: ExamSectionRange, questions: Iterable[QuestionResult]) -> SectionResult:
    counts = _counts(questions)
    correct, wrong = counts[QuestionStatus.CORRECT], counts[QuestionStatus.WRONG]
    bonus = counts[QuestionStatus.BONUS]
    return SectionResult(
        part=rng.part,
        subject=rng.subject,
        total_questions=rng.size,
        correct=correct,
        wrong=wrong,
        skipped=counts[QuestionStatus.UNATTEMPTED],
        bonus=bonus,
        marks_per_correct=rng.correct_marks,
        negative_per_wrong=rng.negative_marks,
        max_marks=rng.max_marks,
        score=section_score(correct, wrong, bonus, rng.correct_marks, rng.negative_marks),
        is_qualifying=rng.is_qualifying,
    )


def _unmapped(questions: Sequence[QuestionResult]) -> Optional[SectionResult]:
    stray = [q for q in questions if q.part == UNKNOWN_PART]
    if not stray:
        return None
    counts = _counts(stray)
    return SectionResult(
        part=UNKNOWN_PART,
        subject="Unknown",
        total_questions=len(stray),
        correct=counts[QuestionStatus.CORRECT],
        wrong=counts[QuestionStatus.WRONG],
        skipped=counts[QuestionStatus.UNATTEMPTED],
        bonus=counts[QuestionStatus.BONUS],
        marks_per_correct=0.0,
        negative_per_wrong=0.0,
        max_marks=0.0,
    )


def score(questions: Sequence[QuestionResult], ranges: Sequence[ExamSectionRange]) -> ScoreSummary:
    sections: List[SectionResult] = []
    qualifying: Optional[SectionResult] = None
    for rng in ranges:
        result = _tally(rng, (q for q in questions if rng.contains(q.sequential_number)))
        if rng.is_qualifying:
            if qualifying is None:
                qualifying = result
            else:
                logger.warning("Extra qualifying section %s is excluded from totals", rng.part)
        else:
            sections.append(result)

    return ScoreSummary(
        sections=tuple(sections),
        qualifying=qualifying,
        unmapped=_unmapped(questions),
        total_correct=sum(s.correct for s in sections),
        total_wrong=sum(s.wrong for s in sections),
        total_skipped=sum(s.skipped for s in sections),
        total_bonus=sum(s.bonus for s in sections),
        total_score=round_marks(sum(s.score for s in sections)),
        total_max_marks=round_marks(sum(s.max_marks for s in sections)),
    )
