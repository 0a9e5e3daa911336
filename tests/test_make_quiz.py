import io

import pytest

from quizwhiz.console import Console
from quizwhiz.make_quiz import (
    Quiz,
    create_new_quiz,
    edit_existing_quiz,
    make_quiz_menu,
    quiz_path,
)


def make_console(lines):
    pauses = []
    out = io.StringIO()
    console = Console(
        io.StringIO("".join(f"{line}\n" for line in lines)),
        out,
        clear_command=None,
        sleep=pauses.append,
    )
    return console, out, pauses


def test_quiz_text_format():
    assert Quiz(30, 3, "abc").to_text() == "30\n3\nabc\n"


def test_quiz_round_trip():
    quiz = Quiz(45, 5, "abcda")
    assert Quiz.from_text(quiz.to_text()) == quiz


@pytest.mark.parametrize("text", ["", "10\n2\n", "x\n2\nab\n"])
def test_quiz_from_malformed_text(text):
    with pytest.raises(ValueError):
        Quiz.from_text(text)


def test_quiz_path(tmp_path):
    assert quiz_path(tmp_path, "math") == tmp_path / "quizzes" / "math.quiz"


def test_create_quiz_saves_file(tmp_path):
    console, out, pauses = make_console(["math", "30", "3", "abc", "1"])
    quiz = create_new_quiz(console, tmp_path)
    assert quiz == Quiz(30, 3, "abc")
    assert quiz_path(tmp_path, "math").read_text() == "30\n3\nabc\n"
    assert "Quiz saved successfully." in out.getvalue()
    assert pauses == [1]


def test_create_quiz_discarded(tmp_path):
    console, out, _ = make_console(["math", "30", "3", "abc", "2"])
    assert create_new_quiz(console, tmp_path) is None
    assert not quiz_path(tmp_path, "math").exists()
    assert "Quiz discarded." in out.getvalue()


def test_create_quiz_answer_count_mismatch(tmp_path):
    console, out, _ = make_console(["math", "30", "3", "ab"])
    assert create_new_quiz(console, tmp_path) is None
    assert not quiz_path(tmp_path, "math").exists()
    assert "must match the number of quiz items" in out.getvalue()


def test_create_quiz_declines_overwrite(tmp_path):
    path = quiz_path(tmp_path, "math")
    path.parent.mkdir()
    path.write_text("10\n1\na\n")
    console, out, _ = make_console(["math", "n"])
    assert create_new_quiz(console, tmp_path) is None
    assert path.read_text() == "10\n1\na\n"
    assert "Quiz not saved." in out.getvalue()


def test_create_quiz_overwrites_when_confirmed(tmp_path):
    path = quiz_path(tmp_path, "math")
    path.parent.mkdir()
    path.write_text("10\n1\na\n")
    console, _, _ = make_console(["math", "Y", "20", "2", "bc", "1"])
    create_new_quiz(console, tmp_path)
    assert Quiz.from_text(path.read_text()) == Quiz(20, 2, "bc")


def test_menu_invalid_choice_then_back(tmp_path):
    console, out, pauses = make_console(["9", "3"])
    make_quiz_menu(console, tmp_path)
    assert "Invalid choice. Try again." in out.getvalue()
    assert pauses == [1]


def test_menu_creates_quiz(tmp_path):
    console, _, _ = make_console(["1", "sci", "15", "2", "ab", "1", "3"])
    make_quiz_menu(console, tmp_path)
    assert quiz_path(tmp_path, "sci").exists()


def test_edit_existing_quiz_reports_and_pauses():
    console, out, pauses = make_console([])
    edit_existing_quiz(console)
    assert "Editing existing quizzes" in out.getvalue()
    assert pauses == [1]