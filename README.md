# lexdemos

A handful of small programs, each built on a tokenizer that turns text into
a stream of tokens with spans:

| Module | What it does |
| --- | --- |
| `lexdemos.brainfuck` | Runs Brainfuck programs. |
| `lexdemos.calculator` | Evaluates integer arithmetic with `+ - * /`, unary minus and parentheses. |
| `lexdemos.ascii_words` | Splits text into ASCII words and byte-sized integers, reporting errors per token. |
| `lexdemos.positions` | Reports the line and column of every word in a text. |
| `lexdemos.jsonparse` | Parses JSON and reports errors with their location. |

Requires Python 3.10 or later and nothing outside the standard library.

## Installation

```
pip install .
```

## Commands

Run a Brainfuck program from a file. Input commands read bytes from standard
input; output commands write characters to standard output:

```
lexdemos-brainfuck hello.bf
```

Evaluate an expression; the syntax tree is printed, then the result. Lexing
and parsing problems are printed instead:

```
lexdemos-calculator '1 + 7 * (3 - 4) / 2'
```

Print the zero-based line and column of every word in a file:

```
lexdemos-positions notes.txt
```

Parse a JSON file and print the value, or print to standard error a report
pointing at the offending span:

```
lexdemos-json data.json
```

## Library use

```python
from lexdemos import brainfuck, calculator, ascii_words, positions, jsonparse

calculator.evaluate("1 + 7 * (3 - 4) / 2")        # -2

for word in positions.word_positions("hello\nworld"):
    print(word)                                    # Word(text='hello', line=0, column=0) ...

value = jsonparse.parse('{"a": [1, true, null]}')  # {'"a"': [1.0, True, None]}

for result in ascii_words.tokenize("Hello 256 world"):
    print(result)
```

### brainfuck

`tokenize(code)` keeps the eight command characters as `Op` members and drops
everything else. `match_jumps(operations)` pairs up `[` and `]`, raising
`BracketError` when they do not balance. `execute(code, stdin=None,
stdout=None)` runs a program on a tape of 30,000 byte cells that wrap around
at 0 and 255; `stdin` is a binary stream and `stdout` a text stream, and they
default to the process's own. Moving the pointer below zero raises
`IndexError`, and reading past the end of input raises `EOFError`.

### calculator

`tokenize(source)` returns a list of `Token` values, skipping spaces, tabs and
newlines; any other unknown character, or an integer literal above 2**63 - 1,
raises `LexError`. `parse(tokens)` builds a tree of `Int`, `Neg`, `Add`, `Sub`,
`Mul` and `Div` nodes, raising `ParseError` on bad input; each node has an
`eval()` method. Division truncates toward zero, and dividing by zero raises
`ZeroDivisionError`. `evaluate(source)` does all three steps.

### ascii_words

`tokenize(source)` is a generator. It skips spaces and tabs and yields
`Token` values for runs of ASCII letters and for integers from 0 to 255. In
place of a token that does not lex it yields, rather than raises, an error
object: `InvalidInteger` for a number above 255, `NonAsciiCharacter` for any
other character. Both are subclasses of `LexingError` and carry the `slice`
and `span` they stand for, so lexing continues past them.

### positions

`word_positions(source)` yields a `Word` with its text, line and column for
every run of word characters.

### jsonparse

`tokenize(source)` yields `Token` values; characters that start no token
become tokens of kind `TokenKind.ERROR`. `parse(source)` parses the first JSON
value in the source: objects become dicts, arrays lists, numbers floats and
`null` `None`. Strings, and object keys, are kept as their quoted text with
the quotes and escape sequences left as they are. Invalid input raises
`JsonError`, whose `message` and `span` say what went wrong and where;
`format_error(filename, source, error)` renders it as a report showing the
source line with the span underlined.

## Limits

There is no command for `ascii_words`; it is used as a library only. The JSON
parser does not decode string escapes and stops after the first value without
checking what follows it.

## Tests

```
pip install .[test]
pytest
```