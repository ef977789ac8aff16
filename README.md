# cfdrills

Solutions to short, well-known programming-contest exercises: string puzzles,
small number problems and sequence scans. Each exercise is a plain Python
function that takes ordinary Python values and returns the answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

The functions are grouped into three modules.

### `cfdrills.text_problems`

```python
from cfdrills.text_problems import abbreviate, game_winner, helpful_maths, hulk_feelings, undub

abbreviate("localization")      # 'l10n'
abbreviate("word")              # 'word'
game_winner("ADAAAA")           # 'Anton'
helpful_maths("3+2+1")          # '1+2+3'
undub("WUBWUBABCWUB")           # 'ABC'
hulk_feelings(2)                # 'I hate that I love it'
```

Also in this module: `distinct_letters`, `stones_to_remove`, `string_task`,
`is_translation`, `fix_word_case`, `capitalize`, `is_pangram` and
`produces_output`.

### `cfdrills.number_problems`

```python
from cfdrills.number_problems import kth_element, lottery_bills, min_moves

lottery_bills(125)    # 3  (100 + 20 + 5)
kth_element(10, 3)    # 5  (odd numbers first, then even ones)
min_moves(10, 4)      # 2  (increments needed to make 10 divisible by 4)
```

Also here: `polyhedron_faces`, `damaged_dragons` and `digit_xor`.
`kth_element`, `min_moves`, `damaged_dragons` and `digit_xor` raise
`ValueError` for arguments outside their range.

### `cfdrills.sequence_problems`

Exercises that scan a list of values: `longest_non_decreasing`,
`min_tank_volume`, `tram_capacity`, `general_moves`, `gravity_flip`,
`can_sort_boxes`, `horseshoes_to_buy`, `can_pass_all_levels` and
`check_sums`.

```python
from cfdrills.sequence_problems import check_sums, gravity_flip

gravity_flip([3, 2, 1, 2])             # [1, 2, 2, 3]
check_sums([(1, 2, 3), (2, 2, 5)])     # '+-'
```

## Command line

The `cfdrills` command reads an exercise's contest-style input from standard
input and prints the answer in the contest's output format. It takes the
exercise name as its one argument:

| name                 | input                                             |
|----------------------|---------------------------------------------------|
| `way-too-long-words` | a count, then that many words                     |
| `line-trip`          | a case count; per case n, x, then n stations      |
| `divisibility`       | a case count; per case a and b                    |
| `halloumi-boxes`     | a case count; per case n, k, then n values        |
| `check-sums`         | a count, then that many triples a b c             |

```
$ printf '2\nword\nlocalization\n' | cfdrills way-too-long-words
word
l10n
$ cfdrills --help
```

On malformed input or an unknown exercise the command prints a message to
standard error and exits with status 1.

From Python, `cfdrills.cli.solve(problem, text)` takes the same exercise name
and input text and returns the output text, raising `ValueError` on bad input.

## What is not included

The command covers only the five multi-case exercises listed above. The other
exercises are available only as library functions; there is no command-line
input reader for them.