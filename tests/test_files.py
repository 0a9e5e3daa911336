from quizwhiz.files import file_exists


def test_existing_file(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("data")
    assert file_exists(target) is True


def test_missing_file(tmp_path):
    assert file_exists(tmp_path / "missing.txt") is False


def test_directory_is_not_a_file(tmp_path):
    assert file_exists(tmp_path) is False


def test_accepts_string_path(tmp_path):
    target = tmp_path / "b.txt"
    target.write_text("")
    assert file_exists(str(target)) is True