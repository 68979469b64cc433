"""The question bank and its plain-text file format: ``id content answer``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from oralmath.arithmetic import calculate_answer

MAX_CONTENT = 99

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class QuestionFormatError(ValueError):
    """Raised when a line of the question file cannot be parsed."""


@dataclass
class Question:
    """One arithmetic exercise with its id and correct answer."""

    id: int
    content: str
    answer: int


def _strtok(text: str, delims: str) -> tuple[str | None, str]:
    """Split off the next token delimited by any character of *delims*."""
    cls = re.escape(delims)
    match = re.match(f"[{cls}]*([^{cls}]+)[{cls}]?", text)
    if match is None:
        return None, ""
    return match.group(1), text[match.end():]


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _format_line(question: Question) -> str:
    return f"{question.id} {question.content} {question.answer}\n"


def parse_question_line(line: str) -> Question | None:
    """Parse one file line; blank lines and ``#`` comments give ``None``."""
    trimmed = line.strip()
    if not trimmed or trimmed.startswith("#"):
        return None
    id_token, rest = _strtok(trimmed, " ")
    content, rest = _strtok(rest, " ")
    answer_token, _ = _strtok(rest, "\n")
    if id_token is None or content is None or answer_token is None:
        raise QuestionFormatError("文件数据格式错误或解析失败!")
    return Question(
        id=_leading_int(id_token),
        content=content[:MAX_CONTENT],
        answer=_leading_int(answer_token),
    )


class QuestionBank:
    """Questions kept in memory and mirrored to a text file.

    New questions go to the front of the bank, as the most recent first.
    """

    def __init__(self, path: str | Path, questions: list[Question] | None = None):
        self.path = Path(path)
        self.questions: list[Question] = list(questions or [])

    @classmethod
    def load(cls, path: str | Path) -> "QuestionBank":
        """Read a bank from *path*, keeping the file's order."""
        bank = cls(path)
        with bank.path.open("r", encoding="utf-8") as handle:
            for number, line in enumerate(handle, start=1):
                try:
                    question = parse_question_line(line)
                except QuestionFormatError as exc:
                    raise QuestionFormatError(f"{bank.path}:{number}: {exc}") from exc
                if question is not None:
                    bank.questions.append(question)
        return bank

    def next_id(self) -> int:
        """Return one more than the largest id in the bank."""
        return max((q.id for q in self.questions), default=0) + 1

    def add(self, content: str) -> Question:
        """Add an exercise, computing its answer, and append it to the file."""
        answer = calculate_answer(content)
        question = Question(self.next_id(), content[:MAX_CONTENT], answer)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(_format_line(question))
        self.questions.insert(0, question)
        return question

    def modify(self, question_id: int, content: str) -> Question:
        """Replace a question's content and answer, then rewrite the file."""
        question = self.find(question_id)
        if question is None:
            raise KeyError(question_id)
        answer = calculate_answer(content)
        question.content = content[:MAX_CONTENT]
        question.answer = answer
        self.save()
        return question

    def find(self, question_id: int) -> Question | None:
        """Return the first question with *question_id*, or ``None``."""
        return next((q for q in self.questions if q.id == question_id), None)

    def save(self) -> None:
        """Rewrite the whole file from the bank."""
        with self.path.open("w", encoding="utf-8") as handle:
            handle.writelines(_format_line(q) for q in self.questions)

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)