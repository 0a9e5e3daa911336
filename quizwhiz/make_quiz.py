"""Creating quiz files and the quiz-making menu."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from quizwhiz.console import Console


@dataclass
class Quiz:
    """A quiz: its duration in minutes, item count and answer key."""

    duration: int
    items: int
    correct_answers: str

    def to_text(self) -> str:
        return f"{self.duration}\n{self.items}\n{self.correct_answers}\n"

    @classmethod
    def from_text(cls, text: str) -> "Quiz":
        tokens = text.split()
        if len(tokens) < 3:
            raise ValueError("quiz file needs a duration, an item count and answers")
        try:
            duration, items = int(tokens[0]), int(tokens[1])
        except ValueError as exc:
            raise ValueError(f"malformed quiz header: {exc}") from exc
        return cls(duration, items, tokens[2])


def quiz_path(root: str | os.PathLike, name: str) -> Path:
    """Path of the quiz called *name* under *root*."""
    return Path(root) / "quizzes" / f"{name}.quiz"


def _read_word(console: Console, text: str) -> str:
    words = console.prompt(text).split()
    while not words:
        words = console.prompt("").split()
    return words[0]


def make_quiz_menu(console: Console, root: str | os.PathLike) -> None:
    while True:
        console.clear()
        console.write("Make a quiz\n\n")
        console.write("[1] Make another quiz\n")
        console.write("[2] Edit existing quizzes\n")
        console.write("[3] Back to main menu\n\n")
        choice = console.prompt_int("Enter your choice: ")
        if choice == 1:
            create_new_quiz(console, root)
        elif choice == 2:
            edit_existing_quiz(console)
        elif choice == 3:
            return
        else:
            console.write("Invalid choice. Try again.\n")
            console.pause(1)


def create_new_quiz(console: Console, root: str | os.PathLike) -> Quiz | None:
    """Ask for a quiz and save it; return the saved quiz, or None if nothing was kept."""
    name = _read_word(console, "Enter quiz file name: ")

    quizzes = Path(root) / "quizzes"
    try:
        quizzes.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        console.write(f"Failed to create quizzes directory: {exc}\n")
        return None

    path = quiz_path(root, name)
    if path.exists():
        answer = _read_word(
            console, "Quiz file already exists. Do you want to overwrite it? (y/n): "
        )
        if answer[0] not in "yY":
            console.write("Quiz not saved.\n")
            return None

    duration = console.prompt_int("Enter time duration in minutes: ")
    items = console.prompt_int("Enter number of items: ")
    answers = _read_word(
        console, f"Enter correct answers (no spaces, {items} characters): "
    )
    if len(answers) != items:
        console.write(
            "Error: The number of correct answers must match the number of quiz items.\n"
        )
        return None

    quiz = Quiz(duration, items, answers)
    try:
        path.write_text(quiz.to_text())
    except OSError as exc:
        console.write(f"Failed to create quiz file: {exc}\n")
        return None

    console.write("Are you done making the quiz?\n")
    confirm = console.prompt_int("[1] Yes\n[2] No\nEnter your choice: ")
    if confirm == 1:
        console.write("Quiz saved successfully.\n")
        result: Quiz | None = quiz
    else:
        path.unlink()
        console.write("Quiz discarded.\n")
        result = None
    console.pause(1)
    return result


def edit_existing_quiz(console: Console) -> None:
    console.write("Editing existing quizzes is not supported.\n")
    console.pause(1)