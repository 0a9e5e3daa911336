# quizwhiz

quizwhiz is a small quiz system for the terminal, driven by menus. A teacher
makes a quiz from an answer key. Each student can take a quiz once and gets a
score. The recorded results can then be listed as a table.

## Installing

```
pip install .
```

The package uses only the standard library.

## Running

```
quizwhiz [--root DIR] [--user NAME]
```

- `--root` sets the directory that holds the quiz and record folders. The
  default is the current directory.
- `--user` sets the name used in the student's record file names. The default
  is the `USER` environment variable, or `unknown` when that is not set.

The main menu looks like this:

```
Welcome to the QuizWhiz System

[1] Make a Quiz
[2] View student's data
[3] View and Take Quizes
[4] Exit the system
```

Text that is not a number counts as an invalid choice. When input ends, the
program leaves the menu.

## Files

Two folders under the root directory are used:

- `quizzes/` holds one `<name>.quiz` file per quiz. The file has three lines:
  - the duration in minutes,
  - the number of items,
  - the correct answers written together as one string, for example `ABCDA`.

  The folder is created when the first quiz is made.
- `records/` holds one `<quiz>_<user>.rec` file per submission. The folder is
  created on the first submission. Each record holds these lines:
  - `Name:`
  - `Section:`
  - `PC:`
  - `Score:`, given as score/items and then the date in `MM/DD/YYYY` form
  - `Percent:`
  - `Answers:`
  - `Correct:`

  A record file is made read-only once it has been written. If a record
  already exists for that quiz and user, the quiz cannot be taken again.

### Making a quiz

Choose **Make a Quiz**, then **Make another quiz**, and enter the following:

1. A quiz name. If a quiz of that name exists, you are asked whether to
   overwrite it.
2. The duration.
3. The number of items.
4. The answer key, with exactly one character per item. If the length does not
   match the number of items, nothing is saved.

At the end, answer `1` to keep the quiz. Any other answer discards it.

### Taking a quiz

Choose **View and Take Quizes**. The quiz files are listed in sorted order.
Pick **Take a quiz**, then enter:

1. The quiz name, without `.quiz`.
2. Your name, section and PC number.
3. One answer per question. Only the first character typed counts.

Confirm with `1` when you have finished. The score, the percentage and the
date are then shown and saved. Any other answer leaves without saving.

### Viewing results

**View student's data** prints one row for each record file, sorted by file
name. The quiz name is the part of the file name before the first underscore.

```
Student Name         Quiz Name            Score      Date
-------------------- -------------------- ---------- ----------
Jane Doe             algebra              4/5        03/14/2024
```

If there is no `records/` folder, it reports that no student records were
found.

## Using it from Python

- `quizwhiz.cli.run(console, root, user)` runs the main menu.
  `quizwhiz.console.Console` takes optional `stdin` and `stdout` streams.
  It also takes `clear_command`, which can be `None` to skip clearing the
  screen, and a `sleep` function. These let you drive the menus from code or
  from tests.
- `quizwhiz.make_quiz.Quiz` reads and writes quiz files with `from_text` and
  `to_text`. `quizwhiz.make_quiz.quiz_path` gives a quiz's file path.
- `quizwhiz.quiz.QuizRecord` writes a result record with `to_text`. It also has
  a `percentage` property.
- `quizwhiz.quiz.score_answers` counts the positions where two answer strings
  match.
- `quizwhiz.quiz.list_quizzes` lists the quiz files.
- `quizwhiz.quiz.record_path` gives a record's file path.
- `quizwhiz.students_data.parse_record` and `load_records` read records into
  `RecordSummary` objects. `format_table` renders them as the table above.

## What it does not do

- Editing an existing quiz is not supported. The menu entry only says so.
- The quiz duration is stored and shown, but no timer is enforced.
- Quizzes hold only an answer key. There is no question text.