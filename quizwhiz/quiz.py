"""Listing and taking quizzes, and writing the result records."""

from __future__ import annotations

import datetime
import os
from dataclasses import dataclass
from pathlib import Path

from quizwhiz.console import Console
from quizwhiz.files import file_exists
from quizwhiz.make_quiz import Quiz, quiz_path


@dataclass
class QuizRecord:
    """The result of one student taking one quiz."""

    name: str
    section: str
    pc: str
    score: int
    items: int
    date: str
    answers: str
    correct: str

    @property
    def percentage(self) -> float:
        if self.items == 0:
            return float("nan")
        return self.score / self.items * 100

    def to_text(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Section: {self.section}\n"
            f"PC: {self.pc}\n"
            f"Score: {self.score}/{self.items} {self.date}\n"
            f"Percent: {self.percentage:.2f}%\n"
            f"Answers: {self.answers}\n"
            f"Correct: {self.correct}\n"
        )


def score_answers(given: str, correct: str) -> int:
    """Number of positions where *given* matches *correct*."""
    return sum(a == b for a, b in zip(given, correct))


def list_quizzes(root: str | os.PathLike) -> list[str]:
    """Sorted file names of the quizzes under *root*; empty if there are none."""
    directory = Path(root) / "quizzes"
    if not directory.is_dir():
        return []
    return sorted(entry.name for entry in directory.iterdir() if ".quiz" in entry.name)


def record_path(root: str | os.PathLike, quiz_name: str, user: str) -> Path:
    return Path(root) / "records" / f"{quiz_name}_{user}.rec"


def _read_word(console: Console, text: str) -> str:
    words = console.prompt(text).split()
    while not words:
        words = console.prompt("").split()
    return words[0]


def _read_line(console: Console, text: str) -> str:
    line = console.prompt(text).strip()
    while not line:
        line = console.prompt("").strip()
    return line


def view_take_quizzes(console: Console, root: str | os.PathLike, user: str) -> None:
    console.clear()
    if (Path(root) / "quizzes").is_dir():
        console.write("Available Quizzes:\n\n")
    names = list_quizzes(root)
    for number, name in enumerate(names, start=1):
        console.write(f"[{number}] {name}\n")

    if not names:
        console.write("No quizzes made yet.\n")
        console.pause(2)
        return

    choice = console.prompt_int(
        "\n[1] Take a quiz\n[2] Back to main menu\nEnter your choice: "
    )
    if choice == 1:
        take_quiz(console, root, user)


def take_quiz(console: Console, root: str | os.PathLike, user: str) -> QuizRecord | None:
    """Run one quiz for *user*; return the saved record, or None if none was saved."""
    quiz_name = _read_word(console, "Enter quiz filename (without .quiz): ")
    path = quiz_path(root, quiz_name)

    if not file_exists(path):
        console.write("Quiz not found.\n")
        console.pause(2)
        return None

    record_file = record_path(root, quiz_name, user)
    if file_exists(record_file):
        console.write("You have already taken this quiz. Not allowed to take twice.\n")
        console.pause(2)
        return None

    try:
        quiz = Quiz.from_text(path.read_text())
    except (OSError, ValueError) as exc:
        console.write(f"Unable to open quiz: {exc}\n")
        return None

    console.write(f"Time Duration: {quiz.duration} minutes\n")
    name = _read_line(console, "Enter your name: ")
    section = _read_word(console, "Enter your section code: ")
    pc_number = _read_word(console, "Enter your PC number: ")

    answers = "".join(
        _read_word(console, f"Question #{number} answer: ")[0]
        for number in range(1, quiz.items + 1)
    )

    done = console.prompt_int("Are you finish answering the quiz? [1] Yes [2] No: ")
    if done != 1:
        return None

    record = QuizRecord(
        name=name,
        section=section,
        pc=pc_number,
        score=score_answers(answers, quiz.correct_answers),
        items=quiz.items,
        date=datetime.date.today().strftime("%m/%d/%Y"),
        answers=answers,
        correct=quiz.correct_answers,
    )
    record_file.parent.mkdir(parents=True, exist_ok=True)
    record_file.write_text(record.to_text())
    record_file.chmod(0o444)

    console.write(
        f"Quiz submitted. Score: {record.score}/{record.items} "
        f"({record.percentage:.2f}%) on {record.date}\n"
    )
    console.pause(2)
    return record