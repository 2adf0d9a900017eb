from attendance_tracker.subjects.model import Subject
from attendance_tracker.subjects.search import filter_subjects

SUBJECTS = [Subject("Math", 3, 1), Subject("Physics"), Subject("Applied Mathematics", 1, 1)]


def test_empty_query_returns_all_in_order():
    assert filter_subjects(SUBJECTS, "") == tuple(SUBJECTS)


def test_case_insensitive_substring_keeps_order():
    assert filter_subjects(SUBJECTS, "ma") == (SUBJECTS[0], SUBJECTS[2])
    assert filter_subjects(SUBJECTS, "MATH") == (SUBJECTS[0], SUBJECTS[2])


def test_no_match_returns_empty():
    assert filter_subjects(SUBJECTS, "chem") == ()


def test_input_is_not_mutated():
    subjects = list(SUBJECTS)

    filter_subjects(subjects, "phys")

    assert subjects == SUBJECTS
