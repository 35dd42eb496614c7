"""Check every quiz question against the compiler and render them to JavaScript."""

from __future__ import annotations

import json
import os
import re
import subprocess
import sys
import tempfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from markdown_it import MarkdownIt

from quizbuild.errors import (
    MARKDOWN_FORMAT,
    CompiledWithWarnings,
    ExecuteError,
    FilenameFormatError,
    MarkdownFormatError,
    MissingExpectedWarning,
    QuizError,
    RustcError,
    ShouldCompile,
    ShouldNotCompile,
    UndefinedShouldCompile,
    WrongOutput,
)

__all__ = [
    "MARKDOWN_FORMAT",
    "MARKDOWN_REGEX",
    "Quiz",
    "Question",
    "parse_markdown",
    "render_to_html",
    "question_number",
    "rustc_command",
    "check_answer",
    "run_program",
    "load_question",
    "render_all",
    "main",
]

MARKDOWN_REGEX = r"""(?msx)
    \AAnswer:\x20(?P<answer>undefined|error|[0-9]+)\n
    Difficulty:\x20(?P<difficulty>1|2|3)\n
    (?:Warnings:\x20(?P<warnings>[a-z_,\x20]+)\n
    )?\n
    \x23\x20Hint\n
    \n
    (?P<hint>.*)
    \n
    \x23\x20Explanation\n
    \n
    (?P<explanation>.*)
    \Z
"""

_MARKDOWN_RE = re.compile(MARKDOWN_REGEX)
_PATH_RE = re.compile(r"questions/(?P<num>[0-9]{3})[a-z0-9-]+\.rs")
_EXE_SUFFIX = ".exe" if os.name == "nt" else ""
_markdown = MarkdownIt("commonmark")


@dataclass
class Quiz:
    """The prose of a live question."""

    difficulty: int
    answer: str
    hint: str
    explanation: str


@dataclass
class Question:
    """A question's code and its prose; prose is None for a tombstone."""

    code: str
    prose: Quiz | None = None

    def to_json(self) -> dict[str, Any]:
        if self.prose is None:
            return {"code": self.code}
        return {
            "code": self.code,
            "difficulty": self.prose.difficulty,
            "answer": self.prose.answer,
            "hint": self.prose.hint,
            "explanation": self.prose.explanation,
        }


def render_to_html(markdown: str) -> str:
    """Render markdown to HTML, opening links in a new tab."""
    html = _markdown.render(markdown)
    return html.replace('<a href="', '<a target="_blank" href="')


def parse_markdown(content: str, md_path) -> tuple[Quiz | None, list[str]]:
    """Parse a question's markdown into its prose and expected warnings."""
    if content.strip() == "tombstone":
        return None, []
    match = _MARKDOWN_RE.search(content)
    if match is None:
        raise MarkdownFormatError(md_path)
    warnings = [
        word.strip() for word in (match["warnings"] or "").split(",")
    ] if match["warnings"] is not None else []
    quiz = Quiz(
        difficulty=int(match["difficulty"]),
        answer=match["answer"],
        hint=render_to_html(match["hint"]),
        explanation=render_to_html(match["explanation"]),
    )
    return quiz, warnings


def question_number(rs_path) -> int:
    """Return the three-digit number encoded in a question's file name."""
    match = _PATH_RE.search(Path(rs_path).as_posix())
    if match is None:
        raise FilenameFormatError()
    return int(match["num"])


def rustc_command(out_dir, rs_path) -> list[str]:
    """Build the compiler command line for a question."""
    return ["rustc", str(rs_path), "--edition=2021", "--out-dir", str(out_dir)]


def _compiles(cmd: list[str]) -> bool:
    try:
        completed = subprocess.run(cmd, stderr=subprocess.DEVNULL)
    except OSError as exc:
        raise RustcError(exc) from exc
    return completed.returncode == 0


def _deny_warnings_command(out_dir, rs_path, allowed) -> list[str]:
    cmd = rustc_command(out_dir, rs_path) + ["--deny=warnings"]
    for warning in allowed:
        cmd += ["--allow", warning]
    return cmd


def check_answer(rs_path, expected: str, warnings: list[str]) -> None:
    """Compile and run a question, raising if it disagrees with its answer."""
    out_dir = Path(tempfile.gettempdir()) / "rust-quiz"

    ok = _compiles(_deny_warnings_command(out_dir, rs_path, warnings))

    if not ok and _compiles(rustc_command(out_dir, rs_path) + ["--allow=warnings"]):
        raise CompiledWithWarnings()

    if expected == "undefined":
        if not ok:
            raise UndefinedShouldCompile()
    elif expected == "error":
        if ok:
            raise ShouldNotCompile()
    elif not ok:
        raise ShouldCompile()
    else:
        run_program(out_dir, rs_path, expected)

    if ok:
        missing = [
            check
            for check in warnings
            if _compiles(
                _deny_warnings_command(
                    out_dir, rs_path, [w for w in warnings if w != check]
                )
            )
        ]
        if missing:
            raise MissingExpectedWarning(missing)


def run_program(out_dir, rs_path, expected: str) -> None:
    """Run a compiled question and compare its output with the answer."""
    exe = Path(out_dir) / (Path(rs_path).stem + _EXE_SUFFIX)
    try:
        completed = subprocess.run([str(exe)], capture_output=True)
    except OSError as exc:
        raise ExecuteError(exc) from exc
    output = completed.stdout.decode("utf-8")
    if output != expected:
        raise WrongOutput(expected=expected, output=output)


def load_question(rs_path) -> tuple[int, Question]:
    """Read, check and number one question file."""
    rs_path = Path(rs_path)
    code = rs_path.read_text(encoding="utf-8")
    md_path = rs_path.with_suffix(".md")
    md_content = md_path.read_text(encoding="utf-8")

    prose, warnings = parse_markdown(md_content, md_path)
    if prose is not None:
        check_answer(rs_path, prose.answer, warnings)

    return question_number(rs_path), Question(code=code, prose=prose)


def _evaluate(rs_path: Path) -> tuple[Path, tuple[int, Question] | None, str | None]:
    try:
        return rs_path, load_question(rs_path), None
    except (QuizError, OSError, ValueError) as exc:
        return rs_path, None, str(exc)


def render_all(questions_dir, output_path) -> None:
    """Check every question in a directory and write the questions script."""
    files = sorted(
        path for path in Path(questions_dir).iterdir() if str(path).endswith(".rs")
    )

    questions: dict[int, Question] = {}
    failed = False
    with ThreadPoolExecutor(max_workers=os.cpu_count() or 1) as pool:
        for rs_path, loaded, error in pool.map(_evaluate, files):
            print(f"evaluating {rs_path}", file=sys.stderr)
            if error is not None:
                failed = True
                print(f"ERROR: {error}", file=sys.stderr)
            elif loaded is not None:
                number, question = loaded
                questions[number] = question

    if failed or len(questions) < len(files):
        raise SystemExit(1)

    payload = {number: questions[number].to_json() for number in sorted(questions)}
    json_object = json.dumps(payload, indent=2, ensure_ascii=False)
    Path(output_path).write_text(f"var questions = {json_object};\n", encoding="utf-8")


def main() -> None:
    """Render the questions in ./questions into ./docs/questions.js."""
    render_all(Path("questions"), Path("docs") / "questions.js")