"""Student records and their text file format: ``major class name score``."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

MAX_FIELD = 49

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class StudentFormatError(ValueError):
    """Raised when a line of the student file cannot be parsed."""


class SortOrder(enum.IntEnum):
    """Direction for sorting students by total score."""

    ASCENDING = 1
    DESCENDING = 2


@dataclass
class Student:
    """A student's identity, answers and total score."""

    major: str
    class_name: str
    name: str
    total_score: int = 0
    answers: list[int] = field(default_factory=list, compare=False)


def _strtok(text: str, delims: str) -> tuple[str | None, str]:
    """Split off the next token delimited by any character of *delims*."""
    cls = re.escape(delims)
    match = re.match(f"[{cls}]*([^{cls}]+)[{cls}]?", text)
    if match is None:
        return None, ""
    return match.group(1), text[match.end():]


def _format_line(student: Student) -> str:
    return f"{student.major} {student.class_name} {student.name} {student.total_score}\n"


def parse_student_line(line: str) -> Student | None:
    """Parse one file line; blank lines and ``#`` comments give ``None``."""
    trimmed = line.strip()
    if not trimmed or trimmed.startswith("#"):
        return None
    major, rest = _strtok(line, " ")
    if major is None:
        raise StudentFormatError("文件数据格式错误或解析失败,无法读取专业!")
    class_name, rest = _strtok(rest, " ")
    if class_name is None:
        raise StudentFormatError("文件数据格式错误或解析失败,无法读取班级!")
    name, rest = _strtok(rest, " ")
    if name is None:
        raise StudentFormatError("文件数据格式错误或解析失败,无法读取姓名!")
    score_token, _ = _strtok(rest, ",\n")
    if score_token is None:
        raise StudentFormatError("文件数据格式错误或解析失败,无法读取分数!")
    match = _LEADING_INT.match(score_token)
    return Student(
        major=major[:MAX_FIELD],
        class_name=class_name[:MAX_FIELD],
        name=name[:MAX_FIELD],
        total_score=int(match.group(1)) if match else 0,
    )


class StudentRoster:
    """Students kept in memory and mirrored to a text file."""

    def __init__(self, path: str | Path, students: list[Student] | None = None):
        self.path = Path(path)
        self.students: list[Student] = list(students or [])

    @classmethod
    def load(cls, path: str | Path) -> "StudentRoster":
        """Read a roster from *path*, keeping the file's order."""
        roster = cls(path)
        with roster.path.open("r", encoding="utf-8") as handle:
            for number, line in enumerate(handle, start=1):
                try:
                    student = parse_student_line(line)
                except StudentFormatError as exc:
                    raise StudentFormatError(f"{roster.path}:{number}: {exc}") from exc
                if student is not None:
                    roster.students.append(student)
        return roster

    def record(self, student: Student) -> None:
        """Add a student at the end and append their line to the file."""
        self.students.append(student)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(_format_line(student))

    def sort_by_score(self, order: SortOrder | int) -> None:
        """Sort by total score in the given order and rewrite the file."""
        if not self.students:
            raise ValueError("学生列表为空,无需排序!")
        try:
            order = SortOrder(order)
        except ValueError:
            raise ValueError("无效的排序选项!") from None
        self.students.sort(
            key=lambda s: s.total_score, reverse=order is SortOrder.DESCENDING
        )
        self.save()

    def find(self, major: str, class_name: str, name: str) -> Student | None:
        """Return the first student matching all three fields, or ``None``."""
        return next(
            (
                s
                for s in self.students
                if (s.major, s.class_name, s.name) == (major, class_name, name)
            ),
            None,
        )

    def save(self) -> None:
        """Rewrite the whole file from the roster."""
        with self.path.open("w", encoding="utf-8") as handle:
            handle.writelines(_format_line(s) for s in self.students)

    def __len__(self) -> int:
        return len(self.students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)