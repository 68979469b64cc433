"""Interactive console for teachers and students of the oral arithmetic drill."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from oralmath.arithmetic import ExpressionError
from oralmath.questions import QuestionBank, QuestionFormatError
from oralmath.quiz import draw_questions, points_per_question
from oralmath.students import Student, StudentFormatError, StudentRoster

DEFAULT_QUESTIONS = "timu.txt"
DEFAULT_STUDENTS = "student.txt"

TEACHER_MENU = (
    "\n | 教务管理系统菜单:\n"
    " | 0.  退出系统\n"
    " | 1.  添加题目\n"
    " | 2.  修改题目\n"
    " | 3.  学生成绩排序\n"
    " | 4.  根据题号查询题目及其答案\n"
    " | 5.  查询学生成绩\n"
)

STUDENT_MENU = (
    "\n | 学生答题系统菜单：\n"
    " | 0.  退出系统\n"
    " | 1.  学生答题\n"
    " | 2.  查询学生成绩\n"
    " | 3.  根据题号查询题目及其答案\n"
)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_WORD = re.compile(r"\S+")


class _Scanner:
    """Whitespace-separated reading from a text stream, line by line."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._buffer = ""

    def _skip_space(self) -> None:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                return
            line = self._stream.readline()
            if not line:
                self._buffer = ""
                raise EOFError
            self._buffer = line

    def word(self) -> str:
        self._skip_space()
        match = _WORD.match(self._buffer)
        self._buffer = self._buffer[match.end():]
        return match.group(0)

    def integer(self) -> int | None:
        """Read a leading integer; an unreadable word is consumed and gives None."""
        self._skip_space()
        match = _INTEGER.match(self._buffer)
        if match is None:
            self.word()
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group(0))

    def line(self) -> str:
        self._skip_space()
        text, newline, rest = self._buffer.partition("\n")
        self._buffer = newline + rest
        return text.rstrip("\r")


def _say(out: TextIO, text: str = "") -> None:
    out.write(text + "\n")


def _error(out: TextIO, message: str) -> None:
    out.write(f"错误：{message}\n")


def _ask_int(scanner: _Scanner, out: TextIO, prompt: str) -> int | None:
    out.write(prompt)
    return scanner.integer()


def _add_questions(bank: QuestionBank, scanner: _Scanner, out: TextIO) -> None:
    count = _ask_int(scanner, out, "请输入要添加的题目数量：") or 0
    for i in range(count):
        _say(out, f"正在进行第 {i + 1}/{count} 次添加...")
        out.write("请输入题目内容(如:50+40,不带空格!):")
        content = scanner.word()
        try:
            question = bank.add(content)
        except ExpressionError as exc:
            _error(out, str(exc))
            _error(out, "无法添加题目,解析失败!")
            continue
        except OSError:
            _error(out, "无法打开题目文件!")
            continue
        _say(out, f"题目已成功添加!\n题目:{question.content} 答案:{question.answer}")


def _modify_questions(bank: QuestionBank, scanner: _Scanner, out: TextIO) -> None:
    count = _ask_int(scanner, out, "请输入要修改的题目数量：") or 0
    if count > len(bank):
        _error(out, "数量太多,自动为您更改为总题目数量!")
        count = len(bank)
    for i in range(count):
        question_id = _ask_int(scanner, out, f"请输入要修改的题号(剩余 {count - i} 个操作):")
        if question_id is None or bank.find(question_id) is None:
            _error(out, "未找到指定题目!")
            continue
        out.write("请输入新的题目内容(如:50+40,不带空格!):")
        content = scanner.line()
        try:
            bank.modify(question_id, content)
        except ExpressionError as exc:
            _error(out, str(exc))
            _error(out, "输入的新题目内容无效!")
            continue
        except OSError:
            _error(out, "无法打开题目文件!")
            continue
        _say(out, f"题号 {question_id} 的题目已成功修改！")


def _sort_students(roster: StudentRoster, scanner: _Scanner, out: TextIO) -> None:
    while True:
        _say(out, "升序请输入1,降序请输入2")
        order = scanner.integer()
        if order in (1, 2):
            break
        _error(out, "错误，请重新输入!")
    try:
        roster.sort_by_score(order)
    except ValueError as exc:
        _error(out, str(exc))
        return
    except OSError:
        _error(out, "无法打开学生文件!")
        return
    _say(out, "学生成绩已成功按要求排序!")


def _query_question(bank: QuestionBank, scanner: _Scanner, out: TextIO) -> None:
    question_id = _ask_int(scanner, out, "请输入题号:")
    if not len(bank):
        _error(out, "题目列表为空,无法查询!")
        return
    question = bank.find(question_id) if question_id is not None else None
    if question is None:
        _error(out, "未找到指定题号的题目!")
        return
    _say(out, f"题号：{question.id}\n题目：{question.content}\n答案：{question.answer}")


def _query_student(roster: StudentRoster, scanner: _Scanner, out: TextIO) -> None:
    if not len(roster):
        _error(out, "学生列表为空,无法查询!")
        return
    _say(out, "请输入专业,班级,姓名:")
    major, class_name, name = scanner.word(), scanner.word(), scanner.word()
    student = roster.find(major, class_name, name)
    if student is None:
        _error(out, "未找到该学生的信息!")
        return
    _say(out, f"学生 {student.name} 的总分是: {student.total_score}")


def _take_quiz(
    bank: QuestionBank, roster: StudentRoster, scanner: _Scanner, out: TextIO
) -> None:
    _say(out, f"题库中共有{len(bank)}道题")
    count = _ask_int(scanner, out, "请根据老师的要求输入试卷题目数量:")
    try:
        paper = draw_questions(list(bank), count if count is not None else -1)
        score = points_per_question(count)
    except ValueError as exc:
        _error(out, str(exc))
        return

    _say(out, "请输入专业,班级,姓名(仅限英文!):")
    student = Student(scanner.word(), scanner.word(), scanner.word())

    _say(out, "\n---------- 开 始 答 题 ----------")
    _say(out, f"每道题的分值为:{score}")
    for question in paper:
        _say(out, f"题号：{question.id}\n题目：{question.content}")
        reply = scanner.integer()
        if reply is not None:
            student.answers.append(reply)
        if reply == question.answer:
            student.total_score += score
            _say(out, "————!!! Accepted !!!————")
        else:
            _say(out, "————!!! Wrong Answer !!!————")
            _say(out, f"————!!! The right answer is {question.answer} !!!————")

    try:
        roster.record(student)
    except OSError:
        _error(out, "无法打开文件以保存学生答题信息!")
        return
    _say(out, f"学生 {student.name} 的总分是:{student.total_score}")


def teacher_session(
    bank: QuestionBank, roster: StudentRoster, reader: TextIO, out: TextIO
) -> None:
    """Run the teacher menu until the user chooses 0 or input ends."""
    scanner = _Scanner(reader)
    out.write(TEACHER_MENU)
    try:
        while True:
            choice = _ask_int(scanner, out, "****请输入操作：")
            if choice == 1:
                _add_questions(bank, scanner, out)
            elif choice == 2:
                _modify_questions(bank, scanner, out)
            elif choice == 3:
                _sort_students(roster, scanner, out)
            elif choice == 4:
                _query_question(bank, scanner, out)
            elif choice == 5:
                _query_student(roster, scanner, out)
            elif choice == 0:
                _say(out, "退出系统！")
                return
            else:
                _error(out, "无效选择！")
    except EOFError:
        return


def student_session(
    bank: QuestionBank, roster: StudentRoster, reader: TextIO, out: TextIO
) -> None:
    """Run the student menu until the user chooses 0 or input ends."""
    scanner = _Scanner(reader)
    out.write(STUDENT_MENU)
    try:
        while True:
            choice = _ask_int(scanner, out, "****请输入操作：")
            if choice == 1:
                _take_quiz(bank, roster, scanner, out)
            elif choice == 2:
                _query_student(roster, scanner, out)
            elif choice == 3:
                _query_question(bank, scanner, out)
            elif choice == 0:
                _say(out, "退出系统！")
                return
            else:
                _error(out, "无效选择！")
    except EOFError:
        return


def _load_bank(path: str, out: TextIO) -> QuestionBank:
    try:
        bank = QuestionBank.load(path)
    except OSError:
        _error(out, "无法打开题目文件!")
    except QuestionFormatError as exc:
        _error(out, str(exc))
    else:
        for q in bank:
            _say(out, f'Loaded question with ID: {q.id}, Content: "{q.content}", Answer: {q.answer}')
        return bank
    _error(out, "加载题目信息失败!")
    return QuestionBank(path)


def _load_roster(path: str, out: TextIO) -> StudentRoster:
    try:
        return StudentRoster.load(path)
    except OSError:
        _error(out, "无法打开学生文件!")
    except StudentFormatError as exc:
        _error(out, str(exc))
    _error(out, "加载学生信息失败!")
    return StudentRoster(path)


def main(argv: list[str] | None = None) -> int:
    """Load the data files, ask for a role and run that role's session."""
    parser = argparse.ArgumentParser(prog="oralmath", description="数学口算系统")
    parser.add_argument("--questions", default=DEFAULT_QUESTIONS, help="题目文件")
    parser.add_argument("--students", default=DEFAULT_STUDENTS, help="学生文件")
    args = parser.parse_args(argv)

    reader, out = sys.stdin, sys.stdout
    bank = _load_bank(args.questions, out)
    roster = _load_roster(args.students, out)

    _say(out, "\n  ----#### 欢迎来到数学口算系统 ####----  ")
    scanner = _Scanner(reader)
    try:
        while True:
            _say(out, "如果你是老师,请输入0\n如果你是学生,请输入1")
            role = scanner.integer()
            if role in (0, 1):
                break
            _error(out, "错误，请重新输入!")
    except EOFError:
        return 0

    session = teacher_session if role == 0 else student_session
    session(bank, roster, _ScannerStream(scanner), out)
    _say(out, "\n  ----#### 感谢您的使用 ####----  ")
    return 0


class _ScannerStream:
    """Hands the unread remainder of a scanner back out as a stream."""

    def __init__(self, scanner: _Scanner):
        self._scanner = scanner

    def readline(self) -> str:
        if self._scanner._buffer:
            line, self._scanner._buffer = self._scanner._buffer, ""
            return line
        return self._scanner._stream.readline()


if __name__ == "__main__":
    sys.exit(main())