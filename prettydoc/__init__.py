# -*- coding: utf-8 -*-

"""Top-level package for prettydoc."""

__author__ = """Tommi Kaikkonen"""
__email__ = 'kaikkonentommi@gmail.com'
__version__ = '0.1.0'

import sys

from .api import (
    cast_doc,
    concat,
    concat_list,
    full_line,
    horz,
    horz_list,
    if_flat,
    text,
    vert,
    vert_list,
)
from .combinators import parens, sep_by, wrap
from .doc import (
    Doc,
    InvalidArgument,
    InvalidText,
    PrettyDocError,
    is_doc,
)
from .extras.color import colored_render_to_stream
from .render import (
    default_render_to_str,
    default_render_to_stream,
    display,
)
from .sexpr import begin_like_sexpr, lambda_like_sexpr, standard_sexpr
from .templates import pretty
from .utils import intersperse


__all__ = [
    'Doc',
    'PrettyDocError',
    'InvalidText',
    'InvalidArgument',
    'is_doc',
    'cast_doc',
    'text',
    'horz',
    'horz_list',
    'vert',
    'vert_list',
    'concat',
    'concat_list',
    'if_flat',
    'full_line',
    'display',
    'pformat',
    'pprint',
    'cpprint',
    'default_render_to_str',
    'default_render_to_stream',
    'pretty',
    'wrap',
    'sep_by',
    'parens',
    'intersperse',
    'standard_sexpr',
    'lambda_like_sexpr',
    'begin_like_sexpr',
    'DEFAULT_WIDTH',
]

DEFAULT_WIDTH = 79


def pformat(doc, width=DEFAULT_WIDTH):
    """Returns ``doc`` laid out within ``width`` columns as a str,
    without a trailing newline."""
    return default_render_to_str(display(cast_doc(doc), width))


def pprint(doc, stream=None, width=DEFAULT_WIDTH, *, end='\n'):
    lines = display(cast_doc(doc), width)
    if stream is None:
        stream = sys.stdout
    default_render_to_stream(stream, lines)
    if end:
        stream.write(end)


def cpprint(
    doc,
    stream=None,
    width=DEFAULT_WIDTH,
    *,
    lexer=None,
    style=None,
    end='\n'
):
    """Like ``pprint``, but syntax highlights the output. Needs the
    optional 'pygments' and 'colorful' packages."""
    lines = display(cast_doc(doc), width)
    if stream is None:
        stream = sys.stdout
    colored_render_to_stream(stream, lines, lexer=lexer, style=style)
    if end:
        stream.write(end)
