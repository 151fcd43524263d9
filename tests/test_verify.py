#!filepath: tests/test_verify.py
import pytest

from timefixture.generator import FixtureGenerator
from timefixture.utils.errors import (
    FixtureFormatError,
    FixtureMismatchError,
    OutputUnavailableError,
)
from timefixture.verify import verify_fixture


@pytest.fixture
def fixture_file(tmp_path, one_year):
    out = tmp_path / "time.txt"
    FixtureGenerator(one_year).write(out)
    return out


def _replace_line(path, line_no, new_line):
    lines = path.read_text(encoding="ascii").splitlines(keepends=True)
    lines[line_no - 1] = new_line
    path.write_text("".join(lines), encoding="ascii")


def test_verify_generated_file(fixture_file):
    report = verify_fixture(fixture_file)
    assert report.lines == 365
    assert report.first.formatted == "1970-01-01T00:00:00.012345678Z"
    assert report.last.epoch_seconds == 364 * 86_400


def test_verify_full_default_fixture(tmp_path):
    out = tmp_path / "time.txt"
    FixtureGenerator().write(out)

    report = verify_fixture(out)
    assert report.lines == 146_462
    assert report.last.formatted == "2370-12-31T00:00:00.012345678Z"


def test_verify_empty_file(tmp_path):
    out = tmp_path / "time.txt"
    out.write_text("", encoding="ascii")

    report = verify_fixture(out)
    assert report.lines == 0
    assert report.first is None and report.last is None


def test_missing_tab(fixture_file):
    _replace_line(fixture_file, 3, "172800 1970-01-03T00:00:00.012345678Z\n")

    with pytest.raises(FixtureFormatError) as exc:
        verify_fixture(fixture_file)
    assert exc.value.line_no == 3


def test_non_integer_epoch(fixture_file):
    _replace_line(fixture_file, 2, "x\t1970-01-02T00:00:00.012345678Z\n")

    with pytest.raises(FixtureFormatError) as exc:
        verify_fixture(fixture_file)
    assert exc.value.line_no == 2


def test_epoch_disagrees_with_timestamp(fixture_file):
    _replace_line(fixture_file, 5, "345600\t1970-01-06T00:00:00.012345678Z\n")

    with pytest.raises(FixtureMismatchError) as exc:
        verify_fixture(fixture_file)
    assert exc.value.line_no == 5


def test_overlong_fraction(fixture_file):
    _replace_line(fixture_file, 1, "0\t1970-01-01T00:00:00.012345678000Z\n")

    with pytest.raises(FixtureMismatchError) as exc:
        verify_fixture(fixture_file)
    assert exc.value.line_no == 1


def test_trailing_zero_is_not_canonical(fixture_file):
    _replace_line(fixture_file, 1, "0\t1970-01-01T00:00:00.012345670Z\n")

    with pytest.raises(FixtureMismatchError, match="non-canonical"):
        verify_fixture(fixture_file)


def test_gap_in_sequence(fixture_file):
    lines = fixture_file.read_text(encoding="ascii").splitlines(keepends=True)
    del lines[9]
    fixture_file.write_text("".join(lines), encoding="ascii")

    with pytest.raises(FixtureMismatchError) as exc:
        verify_fixture(fixture_file)
    assert exc.value.line_no == 10


def test_missing_file(tmp_path):
    with pytest.raises(OutputUnavailableError):
        verify_fixture(tmp_path / "nope.txt")


def test_non_ascii_byte(tmp_path):
    out = tmp_path / "time.txt"
    out.write_bytes(b"0\t1970-01-01T00:00:00.012345678Z\n\xe9\t1970\n")

    with pytest.raises(FixtureFormatError) as exc:
        verify_fixture(out)
    assert exc.value.line_no == 2


def test_leading_zero_epoch(fixture_file):
    _replace_line(fixture_file, 1, "00\t1970-01-01T00:00:00.012345678Z\n")

    with pytest.raises(FixtureFormatError, match="non-canonical") as exc:
        verify_fixture(fixture_file)
    assert exc.value.line_no == 1


def test_crlf_line_ending(fixture_file):
    _replace_line(fixture_file, 4, "259200\t1970-01-04T00:00:00.012345678Z\r\n")

    with pytest.raises(FixtureMismatchError) as exc:
        verify_fixture(fixture_file)
    assert exc.value.line_no == 4
