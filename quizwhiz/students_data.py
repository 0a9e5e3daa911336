"""Reading student result records and showing them as a table."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from quizwhiz.console import Console

_SCORE = re.compile(r"Score:\s*([+-]?\d+)/([+-]?\d+)\s*([^\n]{0,10})")
_ROW = "{:<20} {:<20} {:<10} {:<10}"
_RULE = "-------------------- -------------------- ---------- ----------"


@dataclass
class RecordSummary:
    """The parts of a result record shown in the student table."""

    name: str
    quiz: str
    score: int
    total: int
    date: str
    section: str = ""
    pc: str = ""

    @property
    def score_text(self) -> str:
        return f"{self.score}/{self.total}"


def _field(line: str, label: str, limit: int) -> str:
    if not line.startswith(label):
        return ""
    return line[len(label):].lstrip()[:limit]


def parse_record(filename: str, text: str) -> RecordSummary:
    """Summarise the record *text* stored under *filename*."""
    lines = (text.splitlines() + [""] * 4)[:4]
    name = _field(lines[0], "Name:", 99)
    section = _field(lines[1], "Section:", 49)
    pc = _field(lines[2], "PC:", 49)
    match = _SCORE.match(lines[3])
    if match:
        score, total, date = int(match.group(1)), int(match.group(2)), match.group(3)
    else:
        score, total, date = 0, 0, ""
    quiz = filename.split("_", 1)[0]
    return RecordSummary(name, quiz, score, total, date, section, pc)


def load_records(root: str | os.PathLike) -> list[RecordSummary]:
    """Summaries of every readable record under *root*, sorted by file name.

    Raises FileNotFoundError when there is no records directory.
    """
    directory = Path(root) / "records"
    summaries = []
    for entry in sorted(directory.iterdir()):
        if ".rec" not in entry.name:
            continue
        try:
            text = entry.read_text()
        except OSError:
            continue
        summaries.append(parse_record(entry.name, text))
    return summaries


def format_table(summaries: Iterable[RecordSummary]) -> str:
    lines = [_ROW.format("Student Name", "Quiz Name", "Score", "Date"), _RULE]
    lines.extend(
        _ROW.format(s.name, s.quiz, s.score_text, s.date) for s in summaries
    )
    return "\n".join(lines) + "\n"


def view_student_data(console: Console, root: str | os.PathLike) -> None:
    console.clear()
    try:
        summaries = load_records(root)
    except FileNotFoundError:
        console.write("No student records found.\n")
        console.pause(2)
        return

    console.write(format_table(summaries))
    console.write("\n")
    try:
        console.prompt("Press Enter to go back to the main menu...\n")
    except EOFError:
        pass