"""Errors raised while checking and rendering quiz questions."""

from __future__ import annotations

from os import PathLike

MARKDOWN_FORMAT = """
    Answer: 999
    Difficulty: 1|2|3

    # Hint

    <!-- markdown -->

    # Explanation

    <!-- markdown -->
"""


class QuizError(Exception):
    """Base class for every failure reported while building the quiz."""


class CompiledWithWarnings(QuizError):
    def __init__(self) -> None:
        super().__init__(
            "program compiled with warnings; make sure every expected warning "
            "is listed in a 'Warnings:' section"
        )


class ExecuteError(QuizError):
    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"failed to execute quiz question: {cause}")


class FilenameFormatError(QuizError):
    def __init__(self) -> None:
        super().__init__("wrong filename format")


class MarkdownFormatError(QuizError):
    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = path
        super().__init__(
            f"{path} does not match the expected format.\n{MARKDOWN_FORMAT}"
        )


class MissingExpectedWarning(QuizError):
    def __init__(self, warnings: list[str]) -> None:
        self.warnings = list(warnings)
        super().__init__(
            "program compiled without expected warning: " + ", ".join(self.warnings)
        )


class RustcError(QuizError):
    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"failed to execute rustc: {cause}")


class ShouldCompile(QuizError):
    def __init__(self) -> None:
        super().__init__("program failed to compile")


class ShouldNotCompile(QuizError):
    def __init__(self) -> None:
        super().__init__("program should fail to compile")


class UndefinedShouldCompile(QuizError):
    def __init__(self) -> None:
        super().__init__("program with undefined behavior should compile")


class WrongOutput(QuizError):
    def __init__(self, expected: str, output: str) -> None:
        self.expected = expected
        self.output = output
        super().__init__(f"wrong output! expected: {expected}, actual: {output}")