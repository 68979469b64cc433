import pytest

from oralmath.arithmetic import ExpressionError, calculate_answer
from oralmath.questions import (
    MAX_CONTENT,
    Question,
    QuestionBank,
    QuestionFormatError,
    parse_question_line,
)


@pytest.fixture
def bank_file(tmp_path):
    path = tmp_path / "timu.txt"
    path.write_text("# bank\n1 50+40 90\n\n2 6*7 42\n", encoding="utf-8")
    return path


def test_parse_line():
    assert parse_question_line("3 50+40 90\n") == Question(3, "50+40", 90)


@pytest.mark.parametrize("line", ["", "   \n", "# comment\n", "  # indented\n"])
def test_parse_blank_and_comment(line):
    assert parse_question_line(line) is None


def test_parse_non_numeric_id_defaults_to_zero():
    assert parse_question_line("x 5+5 10").id == 0


@pytest.mark.parametrize("line", ["1 5+5", "1\n"])
def test_parse_missing_fields(line):
    with pytest.raises(QuestionFormatError):
        parse_question_line(line)


def test_parse_truncates_content():
    question = parse_question_line("1 " + "1" * 150 + "+1 5")
    assert len(question.content) == MAX_CONTENT


def test_load_keeps_file_order(bank_file):
    bank = QuestionBank.load(bank_file)
    assert list(bank) == [Question(1, "50+40", 90), Question(2, "6*7", 42)]
    assert len(bank) == 2


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        QuestionBank.load(tmp_path / "absent.txt")


def test_load_bad_line(tmp_path):
    path = tmp_path / "timu.txt"
    path.write_text("1 5+5 10\n2 broken\n", encoding="utf-8")
    with pytest.raises(QuestionFormatError, match=":2:"):
        QuestionBank.load(path)


def test_next_id_follows_largest(tmp_path):
    path = tmp_path / "timu.txt"
    path.write_text("5 1+1 2\n2 1+2 3\n", encoding="utf-8")
    assert QuestionBank.load(path).next_id() == 6


def test_add_prepends_and_appends_to_file(tmp_path):
    path = tmp_path / "timu.txt"
    bank = QuestionBank(path)
    first = bank.add("6*7")
    second = bank.add("9-4")
    assert first.id == 1
    assert second.id == first.id + 1
    assert first.answer == calculate_answer("6*7")
    assert [q.id for q in bank] == [second.id, first.id]
    reloaded = QuestionBank.load(path)
    assert list(reloaded) == [first, second]


def test_add_invalid_expression_leaves_bank_unchanged(bank_file):
    bank = QuestionBank.load(bank_file)
    with pytest.raises(ExpressionError):
        bank.add("8/0")
    assert len(bank) == 2
    assert len(QuestionBank.load(bank_file)) == 2


def test_modify_updates_and_saves(bank_file):
    bank = QuestionBank.load(bank_file)
    updated = bank.modify(2, "9-4")
    assert updated.content == "9-4"
    assert updated.answer == calculate_answer("9-4")
    assert QuestionBank.load(bank_file).find(2) == updated


def test_modify_unknown_id(bank_file):
    bank = QuestionBank.load(bank_file)
    with pytest.raises(KeyError):
        bank.modify(99, "1+1")


def test_modify_invalid_content_keeps_question(bank_file):
    bank = QuestionBank.load(bank_file)
    with pytest.raises(ExpressionError):
        bank.modify(1, "12")
    assert bank.find(1) == Question(1, "50+40", 90)


def test_find_missing_returns_none(bank_file):
    assert QuestionBank.load(bank_file).find(7) is None


def test_save_round_trip(tmp_path):
    path = tmp_path / "timu.txt"
    questions = [Question(4, "2+2", 4), Question(1, "3*3", 9)]
    QuestionBank(path, questions).save()
    assert list(QuestionBank.load(path)) == questions