# Template
# (pattern language describing each character of a password)
#
# Syntax:
#
#   -X    literal X (escape)
#   .X    character from class X, lowercase
#   :X    character from class X, uppercase
#   X     character from class X in random case, when X is a class tag
#   other characters are copied to output
#

from typing import NamedTuple

from .alphabet import CLASS_TAGS, pool
from .sampler import (GenerationError, draw,
                      FORCE_LOWER, FORCE_UPPER, RANDOM_CASE)

ESCAPE = '-'
MODIFIERS = {
    '.': FORCE_LOWER,
    ':': FORCE_UPPER,
}

LITERAL = 'literal'
CLASS = 'class'


class TemplateSyntaxError(GenerationError):

    def __init__(self, template, position):
        GenerationError.__init__(
            self, f"Syntax error: {template[position]!r} at end of template "
                  f"{template!r} is not followed by a character.")
        self.template = template
        self.position = position


class Instruction(NamedTuple):
    kind: str
    char: str
    case_mode: str = None

    def __str__(self):
        if self.kind == LITERAL:
            return f"literal {self.char!r}"
        return f"class {self.char!r} ({self.case_mode})"


def compile_template(template: str):
    """Scan `template`, generate instructions.

    Raises TemplateSyntaxError when an escape or modifier is left
    without the following character. The error is raised only when
    the scan reaches the end, instructions before it are already produced.

    """
    pos = 0
    while pos < len(template):
        ch = template[pos]
        if ch == ESCAPE or ch in MODIFIERS:
            if pos + 1 >= len(template):
                raise TemplateSyntaxError(template, pos)
            arg = template[pos + 1]
            pos += 2
            if ch == ESCAPE:
                yield Instruction(LITERAL, arg)
            else:
                yield Instruction(CLASS, arg, MODIFIERS[ch])
            continue
        pos += 1
        if ch in CLASS_TAGS:
            yield Instruction(CLASS, ch, RANDOM_CASE)
        else:
            yield Instruction(LITERAL, ch)


def interpret(template: str, avoid_similar=False, avoid_programming=False):
    """Interpret `template`, generate output characters one by one.

    Filters apply only to characters drawn from a class,
    escaped and literal characters are passed unchanged.

    """
    filters = (avoid_similar, avoid_programming)
    for instr in compile_template(template):
        if instr.kind == LITERAL:
            yield instr.char
            continue
        yield draw(pool(instr.char), *filters, case_mode=instr.case_mode)


def render(template: str, avoid_similar=False, avoid_programming=False) -> str:
    """Interpret whole `template`, return the output string.

    Nothing is returned on error, the exception propagates.

    """
    return ''.join(interpret(template, avoid_similar, avoid_programming))


def template_length(template: str) -> int:
    """Number of characters produced by `template`."""
    return sum(1 for _ in compile_template(template))
