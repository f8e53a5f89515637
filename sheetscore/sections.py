import logging
from typing import Sequence

from sheetscore.models import ExamSectionRange, SectionAssignment

logger = logging.getLogger(__name__)

UNKNOWN_PART = "?"
UNKNOWN_SECTION = SectionAssignment(
    part=UNKNOWN_PART,
    subject="Unknown",
    correct_marks=0.0,
    negative_marks=0.0,
    is_mapped=False,
)


def resolve_section(sequential_number: int, ranges: Sequence[ExamSectionRange]) -> SectionAssignment:
    for r in ranges:
        if r.contains(sequential_number):
            return SectionAssignment(
                part=r.part,
                subject=r.subject,
                correct_marks=r.correct_marks,
                negative_marks=r.negative_marks,
            )
    logger.warning("Question %d falls outside every section range", sequential_number)
    return UNKNOWN_SECTION
