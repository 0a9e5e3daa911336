"""Main menu of the quiz system."""

from __future__ import annotations

import argparse
import os

from quizwhiz.console import Color, Console, colorize
from quizwhiz.make_quiz import make_quiz_menu
from quizwhiz.quiz import view_take_quizzes
from quizwhiz.students_data import view_student_data


def run(console: Console, root: str | os.PathLike, user: str) -> None:
    """Show the main menu until the user exits or input ends."""
    try:
        while True:
            console.clear()
            console.write(colorize("Welcome to the QuizWhiz System", Color.YELLOW) + "\n\n")
            console.write(colorize("[1] Make a Quiz", Color.GREEN) + "\n")
            console.write(colorize("[2] View student's data", Color.GREEN) + "\n")
            console.write(colorize("[3] View and Take Quizes", Color.GREEN) + "\n")
            console.write(colorize("[4] Exit the system", Color.RED) + "\n\n")
            choice = console.prompt_int(
                colorize("Enter your choice:", Color.YELLOW) + " " + Color.CYAN.value
            )
            console.write(Color.RESET.value)

            if choice == 1:
                make_quiz_menu(console, root)
            elif choice == 2:
                view_student_data(console, root)
            elif choice == 3:
                view_take_quizzes(console, root, user)
            elif choice == 4:
                console.write("Exiting the system...\n")
                return
            else:
                console.write(colorize("Invalid choice. Please try again.", Color.RED) + "\n")
                console.pause(1)
    except EOFError:
        console.write(Color.RESET.value + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="quizwhiz", description="Make and take quizzes.")
    parser.add_argument("--root", default=".", help="directory holding quizzes and records")
    parser.add_argument(
        "--user",
        default=os.environ.get("USER") or "unknown",
        help="name used for the student's record files",
    )
    args = parser.parse_args(argv)

    console = Console()
    run(console, args.root, args.user)
    try:
        console.prompt("Press Enter to exit...\n")
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())