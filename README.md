# logsurgeon

Building blocks for searching logs with wildcard queries.

A search query such as `user=12* logged in` is turned into an
`Expression`, sliced into `ExpressionView`s, converted to regular
expression strings, and described as a `QueryInterpretation`: a sequence
of static text and typed variable tokens.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Wildcard expressions

`logsurgeon.expression.Expression` understands two wildcards:

- `*` matches zero or more characters (greedy wildcard);
- `?` matches exactly one character (non-greedy wildcard).

A backslash escapes the next character, so `\*` and `\?` stand for a
literal asterisk and question mark. Each character of the expression is
available through `Expression.chars` as an `ExpressionCharacter`, whose
role is a `CharType` (`NORMAL`, `GREEDY_WILDCARD`, `NON_GREEDY_WILDCARD`
or `ESCAPE`).

```python
from logsurgeon.expression import Expression
from logsurgeon.expression_view import ExpressionView

expression = Expression("a*b?")
view = ExpressionView(expression, 0, 4)

regex, has_wildcard = view.generate_regex_string(set("()[]{}|.+*?\\^$-"))
# regex == "a.*b.", has_wildcard is True
```

`generate_regex_string` turns `*` into `.*` and `?` into `.`, drops escape
characters, and puts a backslash before every character found in the
collection of special characters you pass in.

`ExpressionView` indices are clamped to the expression's length, so a view
never points outside its expression; negative indices raise `ValueError`.
A view also offers:

- `search_string` — the covered part of the original text;
- `is_well_formed()` — false when the view begins right after an escape
  character or ends on one;
- `starts_or_ends_with_greedy_wildcard()`;
- `extend_to_adjacent_greedy_wildcards()` — returns whether the view could
  be widened over a neighbouring `*`, together with the widened view.

## Query interpretations

A `QueryInterpretation` keeps its tokens in canonical form: adjacent
static tokens are always merged, so two interpretations compare equal
exactly when they describe the same query. Interpretations are ordered
(static tokens before variable tokens), so they can be sorted; they are
mutable and therefore not hashable.

```python
from logsurgeon.query_interpretation import QueryInterpretation

interpretation = QueryInterpretation.from_static("user=")
interpretation.append_variable_token(3, "12*", True)
interpretation.append_static_token(" logged in")

interpretation.serialize()
# "logtype='user=<3>(12*) logged in', contains_wildcard='010'"
```

`append_query_interpretation` appends another interpretation, `logtype`
returns a copy of the token list, and `clear` empties it.

The tokens themselves, `StaticQueryToken` and `VariableQueryToken`, live in
`logsurgeon.query_tokens`. A variable token is ordered by variable type,
then query substring, then whether it contains a wildcard.

## Identifiers

`logsurgeon.unique_id.UniqueIdGenerator` hands out consecutive integer
identifiers starting at zero through `generate_id()`; its `num_ids`
property reports how many it has issued.

## What this package does not do

It does not read or parse log files, and it has no lexer, schema parser or
command-line tool. It does not decide which parts of a query are
variables: callers build `QueryInterpretation`s themselves, and supply the
set of regex special characters to `generate_regex_string`.