import re

import pytest

from find_face_landmarks.models import Point
from find_face_landmarks.processing.csv_exporter import format_landmark_rows, write_landmarks_csv
from find_face_landmarks.utils.exceptions import ErrorKind, ExportError


POINTS = [Point(120, 45), Point(3, 0), Point(640, 480), Point(7, 1000)]


def test_writes_header_and_rows_in_order(tmp_path):
    output = tmp_path / "landmarks.csv"

    num_rows = write_landmarks_csv(POINTS, str(output))

    assert num_rows == len(POINTS)
    assert output.read_bytes() == b"x,y\n120,45\n3,0\n640,480\n7,1000\n"


def test_rows_are_plain_integers(tmp_path):
    output = tmp_path / "landmarks.csv"
    write_landmarks_csv(POINTS, str(output))

    lines = output.read_text().splitlines()
    assert lines[0] == "x,y"
    assert all(re.fullmatch(r"\d+,\d+", line) for line in lines[1:])


def test_truncates_existing_file(tmp_path):
    output = tmp_path / "landmarks.csv"
    output.write_text("old content\n" * 50)

    write_landmarks_csv([Point(1, 2)], str(output))

    assert output.read_text() == "x,y\n1,2\n"


def test_empty_landmarks_writes_only_header(tmp_path):
    output = tmp_path / "landmarks.csv"

    assert write_landmarks_csv([], str(output)) == 0
    assert output.read_text() == "x,y\n"


def test_unopenable_path(tmp_path):
    output = tmp_path / "missing_dir" / "landmarks.csv"

    with pytest.raises(ExportError, match="unable to open") as exc_info:
        write_landmarks_csv(POINTS, str(output))
    assert exc_info.value.kind is ErrorKind.IO
    assert not output.exists()


def test_format_landmark_rows():
    assert format_landmark_rows(POINTS[:2]) == [[120, 45], [3, 0]]
