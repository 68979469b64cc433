# oralmath

A small console system for practising mental arithmetic. Teachers keep a
bank of two-operand questions such as `50+40` or `81/9`. Students take
papers drawn at random from that bank, and their scores are recorded.
The prompts and messages are in Chinese.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
oralmath
```

By default the program reads the question bank from `timu.txt` and the
score list from `student.txt` in the current directory. Other files can be
named:

```
oralmath --questions my_questions.txt --students my_scores.txt
```

On start the program prints every question it loaded. If a file is missing
or malformed, it reports an error and starts with an empty list. It then
asks whether you are a teacher (`0`) or a student (`1`), and it asks again
until you give one of those. When input ends, the program exits.

### Teacher menu

| Choice | Action |
|-------:|--------|
| 0 | Quit |
| 1 | Add questions. The answer is worked out automatically and the question is appended to the bank file. |
| 2 | Modify questions by number. If you ask for more than the bank holds, the count is reduced to the bank's size. The bank file is rewritten. |
| 3 | Sort student scores, ascending (`1`) or descending (`2`). The score file is rewritten. |
| 4 | Look up a question and its answer by number |
| 5 | Look up a student's score by major, class and name |

### Student menu

| Choice | Action |
|-------:|--------|
| 0 | Quit |
| 1 | Take a quiz. Give the number of questions, then your major, class and name, then answer each question. |
| 2 | Look up a student's score |
| 3 | Look up a question and its answer by number |

A quiz is worth 100 points, split between its questions by integer
division. For example, with 3 questions each one is worth 33 points. At the
end of a quiz, the student's major, class, name and total score are
appended to the score file.

## Questions

A question is written without spaces, as digits, an operator (`+`, `-`,
`*`, `/`) and digits, for example `12*3`. Division is integer division.
Dividing by zero or using an unknown operator is rejected.

## File formats

`timu.txt` holds one question per line, as `id content answer`:

```
1 50+40 90
2 9*8 72
```

`student.txt` holds one result per line, as `major class name score`:

```
Math ClassA Alice 100
```

Blank lines and lines that start with `#` are ignored in both files. A new
question gets an id one greater than the largest id already in the bank.

## Using it as a library

```python
from oralmath.arithmetic import calculate_answer, ExpressionError
from oralmath.questions import QuestionBank
from oralmath.students import StudentRoster, SortOrder
from oralmath.quiz import draw_questions, points_per_question

calculate_answer("12*3")            # 36

bank = QuestionBank.load("timu.txt")
question = bank.add("7+8")          # appended to timu.txt
bank.modify(question.id, "7*8")     # rewrites timu.txt
print(bank.find(question.id))

paper = draw_questions(list(bank), 2)
points_per_question(len(paper))     # 50

roster = StudentRoster.load("student.txt")
roster.sort_by_score(SortOrder.DESCENDING)
print(roster.find("Math", "ClassA", "Alice"))
```

The library raises errors as follows:

- `ExpressionError` for a question it cannot evaluate.
- `QuestionFormatError` and `StudentFormatError` for malformed file lines.
- `NotEnoughQuestionsError` when a paper asks for more questions than the bank holds.
- `KeyError` from `QuestionBank.modify` for an unknown id.

## Limitations

- Anyone can choose the teacher role; there are no accounts or passwords.
- Only the total score of each student is stored. The individual answers
  given in a quiz are not written to any file.