import pytest

from attendance_tracker.core.exceptions import ExportError
from attendance_tracker.export.csv_exporter import export_csv
from attendance_tracker.subjects.model import Profile, Subject

HEADER = "Subject,Classes Attended,Classes Missed,Attendance Percentage"


def test_single_subject_exact_output():
    profile = Profile(name="Alex", subjects=(Subject("Math", 3, 1),))

    assert export_csv(profile) == f"{HEADER}\nMath,3,1,75.00%"


def test_rows_follow_profile_order_without_trailing_newline():
    profile = Profile(
        name="Alex",
        subjects=(Subject("Zoology", 0, 0), Subject("Art", 2, 1), Subject("Bio", 1, 3)),
    )

    text = export_csv(profile)

    assert text.split("\n") == [
        HEADER,
        "Zoology,0,0,0.00%",
        "Art,2,1,66.67%",
        "Bio,1,3,25.00%",
    ]
    assert not text.endswith("\n")


def test_empty_profile_cannot_be_exported():
    with pytest.raises(ExportError):
        export_csv(Profile(name="Alex", subjects=()))


def test_legacy_output_does_not_escape_commas():
    profile = Profile(name="Alex", subjects=(Subject("Art, Design", 1, 0),))

    assert export_csv(profile) == f"{HEADER}\nArt, Design,1,0,100.00%"


def test_quoted_output_escapes_names():
    profile = Profile(name="Alex", subjects=(Subject("Art, Design", 1, 0), Subject("Math", 3, 1)))

    assert export_csv(profile, quoted=True) == f'{HEADER}\n"Art, Design",1,0,100.00%\nMath,3,1,75.00%'
