"""Immutable records passed between the extraction and scoring stages.

Everything here is a frozen pydantic model so a scorecard can be handed to the web
layer as-is and serialized with ``model_dump(mode="json")``.
"""
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class Dialect(str, Enum):
    ASSESSMENT_TABLE = "assessment_table"
    VIEW_CANDIDATE_RESPONSE = "view_candidate_response"


class QuestionStatus(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    UNATTEMPTED = "unattempted"
    BONUS = "bonus"


# --- EXAM CATALOG ---
class SubjectConfig(Record):
    name: str
    part: str
    total_questions: int
    max_marks: float
    correct_marks: float
    negative_marks: float
    is_qualifying: bool = False


class ExamConfig(Record):
    id: str
    name: str
    category: str
    total_questions: int
    max_marks: float
    subjects: Tuple[SubjectConfig, ...]


class ExamCategory(Record):
    id: str
    label: str


class ExamSectionRange(Record):
    part: str
    subject: str
    start: int
    end: int
    correct_marks: float
    negative_marks: float
    max_marks: float
    is_qualifying: bool = False

    def contains(self, number: int) -> bool:
        return self.start <= number <= self.end

    @property
    def size(self) -> int:
        return self.end - self.start + 1


class SectionAssignment(Record):
    part: str
    subject: str
    correct_marks: float
    negative_marks: float
    is_mapped: bool = True


# --- EXTRACTION ---
class CandidateInfo(Record):
    registration_number: str = ""
    roll_number: str = ""
    candidate_name: str = ""
    community: str = ""
    venue_name: str = ""
    exam_date: str = ""
    shift: str = ""
    subject: str = ""


class RawOption(Record):
    option_number: int
    image_url: Optional[str] = None
    text: Optional[str] = None
    is_correct: bool = False
    is_chosen: bool = False


class RawQuestion(Record):
    sequential_number: int
    section_local_number: int = 0
    status_label: str = ""
    chosen_option: Optional[int] = None
    chosen_option_inferred: bool = False
    correct_option: Optional[int] = None
    question_text: Optional[str] = None
    image_url: Optional[str] = None
    options: Tuple[RawOption, ...] = ()


# --- SCORING ---
class QuestionResult(RawQuestion):
    part: str
    subject: str
    status: QuestionStatus
    marks_awarded: float
    image_url_hindi: Optional[str] = None
    image_url_english: Optional[str] = None


class SectionResult(Record):
    part: str
    subject: str
    total_questions: int
    correct: int = 0
    wrong: int = 0
    skipped: int = 0
    bonus: int = 0
    marks_per_correct: float
    negative_per_wrong: float
    max_marks: float
    score: float = 0.0
    is_qualifying: bool = False


class ScoreSummary(Record):
    sections: Tuple[SectionResult, ...] = ()
    qualifying: Optional[SectionResult] = None
    unmapped: Optional[SectionResult] = None
    total_correct: int = 0
    total_wrong: int = 0
    total_skipped: int = 0
    total_bonus: int = 0
    total_score: float = 0.0
    total_max_marks: float = 0.0


class ScorecardData(Record):
    exam_id: str
    exam_name: str
    dialect: Dialect
    base_url: str
    candidate_info: Optional[CandidateInfo] = None
    sections: Tuple[SectionResult, ...] = ()
    qualifying_section: Optional[SectionResult] = None
    unmapped_section: Optional[SectionResult] = None
    questions: Tuple[QuestionResult, ...] = ()
    ranges: Tuple[ExamSectionRange, ...] = ()
    total_correct: int = 0
    total_wrong: int = 0
    total_skipped: int = 0
    total_bonus: int = 0
    total_score: float = 0.0
    total_max_marks: float = 0.0
    warnings: Tuple[str, ...] = ()


class FetchResult(Record):
    success: bool
    html: Optional[str] = None
    error: Optional[str] = None
