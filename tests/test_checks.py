import pytest

from forkunit import checks


@pytest.mark.parametrize(
    "check",
    [
        checks.strcpy_basic,
        checks.strcpy_empty,
        checks.strncmp_equal,
        checks.strncmp_different,
        checks.atoi_basic,
        checks.atoi_negative,
        checks.atoi_invalid,
        checks.memset_basic,
        checks.memset_zero_len,
        checks.strdup_basic,
        checks.strdup_empty,
        checks.isalpha_basic,
        checks.bzero_basic,
        checks.bzero_zero_len,
    ],
)
def test_check_passes(check):
    assert check() == 0


def test_basic_line_passes(tmp_path):
    (tmp_path / "basic.txt").write_text("Hello World\nSecond line\n", encoding="utf-8")
    assert checks.basic_line_test(tmp_path) == 0


def test_basic_line_wrong_content(tmp_path):
    (tmp_path / "basic.txt").write_text("Goodbye\n", encoding="utf-8")
    assert checks.basic_line_test(tmp_path) == 1


def test_basic_line_without_newline_fails(tmp_path):
    (tmp_path / "basic.txt").write_text("Hello World", encoding="utf-8")
    assert checks.basic_line_test(tmp_path) == 1


def test_basic_line_empty_file_fails(tmp_path):
    (tmp_path / "basic.txt").write_text("", encoding="utf-8")
    assert checks.basic_line_test(tmp_path) == 1


def test_basic_line_missing_file(tmp_path):
    assert checks.basic_line_test(tmp_path) == -1


def test_empty_file_passes(tmp_path):
    (tmp_path / "empty.txt").write_text("", encoding="utf-8")
    assert checks.empty_file_test(tmp_path) == 0


def test_empty_file_with_content_fails(tmp_path):
    (tmp_path / "empty.txt").write_text("x\n", encoding="utf-8")
    assert checks.empty_file_test(tmp_path) == -1


def test_empty_file_missing(tmp_path):
    assert checks.empty_file_test(str(tmp_path)) == -1


def test_default_testfiles_location():
    assert checks.DEFAULT_TESTFILES.as_posix() == "real-tests/testfiles"