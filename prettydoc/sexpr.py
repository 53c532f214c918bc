"""Layouts for Lisp-style s-expressions."""
from .api import horz, if_flat, vert, vert_list
from .combinators import parens, sep_by


def standard_sexpr(func, args):
    """``(func arg ...)`` on one line, or with each argument on its
    own line aligned after the opening parenthesis."""
    return parens(sep_by([func, *args], ' '))


def lambda_like_sexpr(keyword, defn, body):
    """``(lambda (x) body)``, or with the body on the next line
    indented by two."""
    return if_flat(
        parens(sep_by([keyword, defn, body], ' ')),
        parens(vert(horz(keyword, ' ', defn), horz(' ', body)))
    )


def begin_like_sexpr(keyword, bodies):
    """``(begin`` followed by each body on its own line, indented
    by two."""
    return parens(vert(keyword, horz(' ', vert_list(bodies))))
