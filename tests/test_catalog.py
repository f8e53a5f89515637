import pytest

from sheetscore import catalog
from sheetscore.models import ExamConfig, SubjectConfig


@pytest.mark.parametrize("exam", catalog.EXAM_CONFIGS, ids=lambda e: e.id)
def test_ranges_are_contiguous_from_one(exam):
    ranges = catalog.subject_ranges(exam)

    assert ranges[0].start == 1
    for prev, cur in zip(ranges, ranges[1:]):
        assert cur.start == prev.end + 1
    assert ranges[-1].end == sum(s.total_questions for s in exam.subjects)


def test_resolve_ranges_cgl_mains():
    ranges = catalog.resolve_ranges("SSC_CGL_MAINS")

    assert [(r.part, r.start, r.end) for r in ranges] == [
        ("A", 1, 30), ("B", 31, 60), ("C", 61, 105), ("D", 106, 130), ("E", 131, 150),
    ]
    assert ranges[-1].is_qualifying
    assert ranges[3].negative_marks == 0.5


def test_resolve_ranges_unknown_exam_is_empty():
    assert catalog.resolve_ranges("NOT_AN_EXAM") == ()
    assert catalog.resolve_ranges(None) == ()


def test_exam_lookup_is_case_insensitive():
    assert catalog.get_exam_config(" ssc_mts ").id == "SSC_MTS"


def test_unknown_exam_falls_back_to_default():
    assert catalog.get_exam_config_or_default("NOPE").id == "SSC_CGL_MAINS"


def test_max_marks_excludes_qualifying_subjects():
    assert catalog.get_exam_config("SSC_CGL_MAINS").max_marks == 390


def test_exams_by_category():
    ids = {e.id for e in catalog.exams_by_category("RAILWAY")}
    assert "RRB_NTPC_CBT1" in ids
    assert all(e.category == "RAILWAY" for e in catalog.exams_by_category("RAILWAY"))
    assert catalog.exams_by_category("NONE") == []


def test_single_section_exam():
    exam = ExamConfig(
        id="X", name="X", category="SSC", total_questions=3, max_marks=6,
        subjects=(SubjectConfig(name="Maths", part="A", total_questions=3, max_marks=6,
                                correct_marks=2, negative_marks=0.5),),
    )
    (only,) = catalog.subject_ranges(exam)
    assert (only.start, only.end, only.size) == (1, 3, 3)
