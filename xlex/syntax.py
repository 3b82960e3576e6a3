"""Operator symbols of the pattern language and small text helpers."""

EPSILON = "@"
CONCAT = "."
UNION = "|"
CLOSURE = "*"
CLOSURE_STAR = "?"
CLOSURE_PLUS = "+"
LBRACKET = "("
RBRACKET = ")"
LMBRACKET = "["
RMBRACKET = "]"
ANY = "~"
ESCAPE = "\\"

SKIPPED = frozenset({" ", EPSILON, "\n"})

RESERVED = frozenset(
    {
        EPSILON,
        CONCAT,
        UNION,
        CLOSURE,
        CLOSURE_STAR,
        CLOSURE_PLUS,
        LBRACKET,
        RBRACKET,
    }
)

CLOSURES = frozenset({CLOSURE, CLOSURE_STAR, CLOSURE_PLUS})


def privilege(symbol):
    """Return the binding strength of an operator; 0 for anything else."""
    if symbol in CLOSURES:
        return 3
    if symbol == CONCAT:
        return 2
    if symbol == UNION:
        return 1
    return 0


def is_reserved(symbol):
    """Tell whether the character is an operator of the pattern language."""
    return symbol in RESERVED


def is_skipped(symbol):
    """Tell whether the character carries no meaning and is dropped."""
    return symbol in SKIPPED


def replace_all(text, old, new):
    """Replace ``old`` repeatedly, searching from the start after each change."""
    if not old:
        raise ValueError("the text to replace must not be empty")
    if old in new:
        raise ValueError("the replacement contains the text it replaces")
    while old in text:
        text = text.replace(old, new, 1)
    return text


def remove_escape(text, escape=ESCAPE):
    """Drop escape characters, keeping the character each one escapes."""
    result = []
    escaped = False
    for char in text:
        if not escaped and char == escape:
            escaped = True
            continue
        escaped = False
        result.append(char)
    return "".join(result)