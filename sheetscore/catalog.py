import logging
from typing import List, Optional, Tuple

from sheetscore import config
from sheetscore.models import ExamCategory, ExamConfig, ExamSectionRange, SubjectConfig

logger = logging.getLogger(__name__)

EXAM_CATEGORIES: Tuple[ExamCategory, ...] = (
    ExamCategory(id="SSC", label="SSC Exams"),
    ExamCategory(id="RAILWAY", label="Railway Exams"),
    ExamCategory(id="IB", label="Intelligence Bureau"),
    ExamCategory(id="BANK", label="Bank Exams"),
    ExamCategory(id="POLICE", label="Police Exams"),
)

# (name, part, questions, max marks, +marks, -marks[, qualifying])
_EXAM_TABLE = [
    ("SSC_CGL_PRE", "SSC CGL Tier-I", "SSC", [
        ("General Intelligence & Reasoning", "A", 25, 50, 2, 0.5),
        ("General Awareness", "B", 25, 50, 2, 0.5),
        ("Quantitative Aptitude", "C", 25, 50, 2, 0.5),
        ("English Comprehension", "D", 25, 50, 2, 0.5),
    ]),
    ("SSC_CGL_MAINS", "SSC CGL Tier-II", "SSC", [
        ("Mathematical Abilities", "A", 30, 90, 3, 1),
        ("Reasoning & General Intelligence", "B", 30, 90, 3, 1),
        ("English Language & Comprehension", "C", 45, 135, 3, 1),
        ("General Awareness", "D", 25, 75, 3, 0.5),
        ("Computer Knowledge", "E", 20, 60, 3, 0.5, True),
    ]),
    ("SSC_CHSL_PRE", "SSC CHSL Tier-I", "SSC", [
        ("General Intelligence", "A", 25, 50, 2, 0.5),
        ("General Awareness", "B", 25, 50, 2, 0.5),
        ("Quantitative Aptitude", "C", 25, 50, 2, 0.5),
        ("English Language", "D", 25, 50, 2, 0.5),
    ]),
    ("SSC_CHSL_MAINS", "SSC CHSL Tier-II", "SSC", [
        ("Mathematical Abilities", "A", 30, 90, 3, 1),
        ("Reasoning & General Intelligence", "B", 30, 90, 3, 1),
        ("English Language & Comprehension", "C", 45, 135, 3, 1),
        ("General Awareness", "D", 30, 90, 3, 1),
    ]),
    ("SSC_CPO_PRE", "SSC CPO Paper-I", "SSC", [
        ("General Intelligence & Reasoning", "A", 50, 50, 1, 0.25),
        ("General Knowledge & Awareness", "B", 50, 50, 1, 0.25),
        ("Quantitative Aptitude", "C", 50, 50, 1, 0.25),
        ("English Comprehension", "D", 50, 50, 1, 0.25),
    ]),
    ("SSC_CPO_MAINS", "SSC CPO Paper-II", "SSC", [
        ("English Language & Comprehension", "A", 200, 200, 1, 0.25),
    ]),
    ("SSC_MTS", "SSC MTS", "SSC", [
        ("Numerical & Mathematical Ability", "A", 20, 20, 1, 0.25),
        ("Reasoning Ability & Problem Solving", "B", 20, 20, 1, 0.25),
        ("General Awareness", "C", 25, 25, 1, 0.25),
        ("English Language & Comprehension", "D", 25, 25, 1, 0.25),
    ]),
    ("SSC_GD_CONSTABLE", "SSC GD Constable", "SSC", [
        ("General Intelligence & Reasoning", "A", 20, 40, 2, 0.5),
        ("General Knowledge & Awareness", "B", 20, 40, 2, 0.5),
        ("Elementary Mathematics", "C", 20, 40, 2, 0.5),
        ("English/Hindi", "D", 20, 40, 2, 0.5),
    ]),
    ("SSC_STENO", "SSC Stenographer", "SSC", [
        ("General Intelligence & Reasoning", "A", 50, 50, 1, 0.25),
        ("General Awareness", "B", 50, 50, 1, 0.25),
        ("English Language & Comprehension", "C", 100, 100, 1, 0.25),
    ]),
    ("RRB_NTPC_CBT1", "RRB NTPC CBT-1", "RAILWAY", [
        ("Mathematics", "A", 30, 30, 1, 0.333),
        ("General Intelligence & Reasoning", "B", 30, 30, 1, 0.333),
        ("General Awareness", "C", 40, 40, 1, 0.333),
    ]),
    ("RRB_NTPC_CBT2", "RRB NTPC CBT-2", "RAILWAY", [
        ("Mathematics", "A", 35, 35, 1, 0.333),
        ("General Intelligence & Reasoning", "B", 35, 35, 1, 0.333),
        ("General Awareness", "C", 50, 50, 1, 0.333),
    ]),
    ("RRB_GROUP_D", "RRB Group D", "RAILWAY", [
        ("Mathematics", "A", 25, 25, 1, 0.333),
        ("General Intelligence & Reasoning", "B", 30, 30, 1, 0.333),
        ("General Science", "C", 25, 25, 1, 0.333),
        ("General Awareness & Current Affairs", "D", 20, 20, 1, 0.333),
    ]),
    ("RRB_JE_CBT1", "RRB JE CBT-1", "RAILWAY", [
        ("Mathematics", "A", 30, 30, 1, 0.333),
        ("General Intelligence & Reasoning", "B", 25, 25, 1, 0.333),
        ("General Awareness", "C", 15, 15, 1, 0.333),
        ("General Science", "D", 30, 30, 1, 0.333),
    ]),
    ("RRB_ALP_CBT1", "RRB ALP CBT-1", "RAILWAY", [
        ("Mathematics", "A", 20, 20, 1, 0.333),
        ("General Intelligence & Reasoning", "B", 25, 25, 1, 0.333),
        ("General Science", "C", 20, 20, 1, 0.333),
        ("General Awareness", "D", 10, 10, 1, 0.333),
    ]),
    ("IB_ACIO", "IB ACIO Tier-I", "IB", [
        ("General Awareness", "A", 25, 25, 1, 0.25),
        ("Quantitative Aptitude", "B", 25, 25, 1, 0.25),
        ("Logical/Analytical Ability", "C", 25, 25, 1, 0.25),
        ("English Language", "D", 25, 25, 1, 0.25),
    ]),
    ("IB_SA", "IB Security Assistant", "IB", [
        ("General Awareness", "A", 25, 25, 1, 0.25),
        ("Quantitative Aptitude", "B", 25, 25, 1, 0.25),
        ("Logical/Analytical Ability", "C", 25, 25, 1, 0.25),
        ("English Language", "D", 25, 25, 1, 0.25),
    ]),
    ("IBPS_PO_PRE", "IBPS PO Prelims", "BANK", [
        ("English Language", "A", 30, 30, 1, 0.25),
        ("Quantitative Aptitude", "B", 35, 35, 1, 0.25),
        ("Reasoning Ability", "C", 35, 35, 1, 0.25),
    ]),
    ("IBPS_PO_MAINS", "IBPS PO Mains", "BANK", [
        ("Reasoning & Computer Aptitude", "A", 45, 60, 1.33, 0.25),
        ("English Language", "B", 35, 40, 1.14, 0.25),
        ("Data Analysis & Interpretation", "C", 35, 60, 1.71, 0.25),
        ("General/Economy/Banking Awareness", "D", 40, 40, 1, 0.25),
    ]),
    ("IBPS_CLERK_PRE", "IBPS Clerk Prelims", "BANK", [
        ("English Language", "A", 30, 30, 1, 0.25),
        ("Numerical Ability", "B", 35, 35, 1, 0.25),
        ("Reasoning Ability", "C", 35, 35, 1, 0.25),
    ]),
    ("IBPS_CLERK_MAINS", "IBPS Clerk Mains", "BANK", [
        ("General/Financial Awareness", "A", 50, 50, 1, 0.25),
        ("General English", "B", 40, 40, 1, 0.25),
        ("Reasoning Ability & Computer Aptitude", "C", 50, 60, 1.2, 0.25),
        ("Quantitative Aptitude", "D", 50, 50, 1, 0.25),
    ]),
    ("SBI_PO_PRE", "SBI PO Prelims", "BANK", [
        ("English Language", "A", 30, 30, 1, 0.25),
        ("Quantitative Aptitude", "B", 35, 35, 1, 0.25),
        ("Reasoning Ability", "C", 35, 35, 1, 0.25),
    ]),
    ("SBI_CLERK_PRE", "SBI Clerk Prelims", "BANK", [
        ("English Language", "A", 30, 30, 1, 0.25),
        ("Numerical Ability", "B", 35, 35, 1, 0.25),
        ("Reasoning Ability", "C", 35, 35, 1, 0.25),
    ]),
    ("DELHI_POLICE_CONSTABLE", "Delhi Police Constable", "POLICE", [
        ("General Knowledge/Current Affairs", "A", 25, 25, 1, 0.25),
        ("Reasoning", "B", 25, 25, 1, 0.25),
        ("Numerical Ability", "C", 25, 25, 1, 0.25),
        ("Computer Awareness", "D", 25, 25, 1, 0.25),
    ]),
    ("DELHI_POLICE_HEAD_CONSTABLE", "Delhi Police Head Constable", "POLICE", [
        ("General Knowledge/Current Affairs", "A", 25, 25, 1, 0.25),
        ("Reasoning/Quantitative Aptitude", "B", 25, 25, 1, 0.25),
        ("English Language", "C", 25, 25, 1, 0.25),
        ("Computer Fundamentals", "D", 25, 25, 1, 0.25),
    ]),
]


def _build_exam(exam_id: str, name: str, category: str, rows: list) -> ExamConfig:
    subjects = tuple(
        SubjectConfig(
            name=row[0], part=row[1], total_questions=row[2], max_marks=row[3],
            correct_marks=row[4], negative_marks=row[5],
            is_qualifying=row[6] if len(row) > 6 else False,
        )
        for row in rows
    )
    return ExamConfig(
        id=exam_id,
        name=name,
        category=category,
        total_questions=sum(s.total_questions for s in subjects),
        max_marks=sum(s.max_marks for s in subjects if not s.is_qualifying),
        subjects=subjects,
    )


EXAM_CONFIGS: Tuple[ExamConfig, ...] = tuple(_build_exam(*entry) for entry in _EXAM_TABLE)
_BY_ID = {exam.id: exam for exam in EXAM_CONFIGS}


def get_exam_config(exam_id: Optional[str]) -> Optional[ExamConfig]:
    if not exam_id:
        return None
    return _BY_ID.get(exam_id.strip().upper())


def get_exam_config_or_default(exam_id: Optional[str]) -> ExamConfig:
    exam = get_exam_config(exam_id)
    if exam is None:
        logger.warning("Unknown exam id %r, falling back to %s", exam_id, config.DEFAULT_EXAM_ID)
        exam = get_exam_config(config.DEFAULT_EXAM_ID) or _BY_ID["SSC_CGL_MAINS"]
    return exam


def exams_by_category(category_id: str) -> List[ExamConfig]:
    return [e for e in EXAM_CONFIGS if e.category == category_id]


def subject_ranges(exam: ExamConfig) -> Tuple[ExamSectionRange, ...]:
    """Absolute question-number ranges, one per subject, starting at 1."""
    ranges = []
    cursor = 1
    for s in exam.subjects:
        start = cursor
        end = cursor + s.total_questions - 1
        cursor = end + 1
        ranges.append(ExamSectionRange(
            part=s.part,
            subject=s.name,
            start=start,
            end=end,
            correct_marks=s.correct_marks,
            negative_marks=s.negative_marks,
            max_marks=s.max_marks,
            is_qualifying=s.is_qualifying,
        ))
    return tuple(ranges)


def resolve_ranges(exam_id: Optional[str]) -> Tuple[ExamSectionRange, ...]:
    exam = get_exam_config(exam_id)
    if exam is None:
        return ()
    return subject_ranges(exam)
