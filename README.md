# xlex

xlex turns a regular expression into automata. It builds a Thompson NFA, then a
DFA by subset construction, then a minimised DFA. Both DFAs can test strings.
The minimised DFA can also be rendered as the source text of a small standalone
recogniser.

## Installing

```
pip install .
```

## Pattern syntax

| Symbol | Meaning                                          |
|--------|--------------------------------------------------|
| `\|`   | alternation                                      |
| `.`    | explicit concatenation (usually implied)         |
| `*`    | zero or more                                     |
| `+`    | one or more                                      |
| `?`    | zero or one                                      |
| `( )`  | grouping                                         |
| `[ ]`  | bracket; its members are joined as alternatives  |
| `~`    | any character, as a fallback transition in `accepts` and in the generated recogniser |
| `\`    | escapes the next character                       |

Spaces, newlines and `@` (the epsilon marker) are dropped from patterns.
`Nfa` raises `ValueError` when an operator lacks operands, when a bracket is
unbalanced, or when the pattern has no symbols.

## Usage

```python
from xlex.nfa import Nfa, prepare
from xlex.dfa import Dfa
from xlex.mdfa import MDfa

print(prepare("a(b|c)*"))   # a.(b|c)*  (concatenation made explicit)

nfa = Nfa("a(b|c)*")
dfa = Dfa(nfa)
mdfa = MDfa(dfa)

mdfa.accepts("abcb")   # True
mdfa.accepts("ba")     # False
print(mdfa.lex())      # source text of a recogniser for the pattern
```

Useful pieces:

- `xlex.nfa`: `prepare`, `Nfa` (with `symbols`, `prepared` and `graph`),
  `NfaGraph` and `NfaNode`.
- `xlex.dfa`: `epsilon_closure`, `move`, `Dfa` (with `nodes` and `accepts`)
  and `DfaNode`.
- `xlex.mdfa`: `MDfa` (with `nodes`, `accepts` and `lex`) and `MDfaNode`.
- `xlex.syntax`: the operator characters and the helpers `privilege`,
  `is_reserved`, `is_skipped`, `replace_all` and `remove_escape`.

## YAML reader building blocks

The `xlex.yamlcore` package holds small parts of a YAML reader:

- `xlex.yamlcore.stream.Stream` reads a `str`, bytes or a file object. It
  decodes UTF-8, UTF-16 and UTF-32. It detects the encoding from a byte-order
  mark, or from the pattern of zero bytes at the start when there is none. It
  tracks position, line and column in a `Mark`. `detect_charset` exposes the
  detection step on its own and returns a `CharacterSet` and the number of
  bytes to skip.
- `xlex.yamlcore.charsource` provides `StreamCharSource` and
  `StringCharSource`, offset cursors with look-ahead.
- `xlex.yamlcore.setting` provides `Setting`, `SettingChange` and
  `SettingChanges`, values whose changes can be undone. `SettingChanges` is a
  context manager that undoes its changes on exit.
- `xlex.yamlcore.collectionstack` provides `CollectionStack` and
  `CollectionType`, which track nested block and flow collections.
- `xlex.yamlcore.depthguard` provides `DepthGuard`. Its `guard` context
  manager raises `DeepRecursion` when nesting reaches the limit.
- `xlex.yamlcore.binary` provides `Binary`, a byte blob that either borrows a
  buffer or owns its bytes after `swap`.

## What it does not do

xlex has no command-line tool. It does not read rules from files and does not
write generated recognisers to disk. `lex()` only returns the text.

`xlex.yamlcore` is not a YAML parser or emitter. It provides only the pieces
listed above.

## Running the tests

```
pip install .[test]
pytest
```