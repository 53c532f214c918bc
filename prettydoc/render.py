import logging
from io import StringIO

from .api import cast_doc
from .doc import (
    Concat,
    FullLine,
    Horz,
    IfFlat,
    InvalidArgument,
    Text,
    Vert,
)

logger = logging.getLogger(__name__)

# Work stack markers.
_ALIGN = object()
_BREAK = object()


class LineBuffer:
    """Append-only list of output lines. The line being written
    to is always the last one, and there is always at least one."""
    __slots__ = ('_lines', '_current')

    def __init__(self):
        self._lines = []
        self._current = []

    def write(self, s):
        self._current.append(s)

    def newline(self, indent):
        self._lines.append(''.join(self._current))
        self._current = [' ' * indent]

    def getlines(self):
        return [*self._lines, ''.join(self._current)]


def render(doc, out, indent, column, width):
    """Renders ``doc`` into the LineBuffer ``out`` and returns the
    column the cursor ends up at.

    ``indent`` is the column to return to after a line break and
    ``column`` the current cursor position. ``width`` is only
    consulted by IfFlat nodes; text that doesn't fit is written
    as is.

    Nodes are processed from an explicit stack in the same order a
    recursive descent would visit them. Each entry pairs a node
    with the indent it renders at. Horz pushes an ``_ALIGN`` marker
    so its second child picks up the column where the first ended,
    and Vert pushes a ``_BREAK`` marker between its children.
    """
    stack = [(doc, indent)]

    while stack:
        doc, indent = stack.pop()

        if isinstance(doc, Text):
            out.write(doc.value)
            column += doc.flat_width
        elif isinstance(doc, Horz):
            stack.append((_ALIGN, doc.second))
            stack.append((doc.first, indent))
        elif isinstance(doc, Concat):
            stack.append((doc.second, indent))
            stack.append((doc.first, indent))
        elif isinstance(doc, Vert):
            stack.append((doc.second, indent))
            stack.append((_BREAK, indent))
            stack.append((doc.first, indent))
        elif isinstance(doc, IfFlat):
            flat_width = doc.when_flat.flat_width
            if flat_width is not None and column + flat_width <= width:
                stack.append((doc.when_flat, indent))
            else:
                stack.append((doc.when_broken, indent))
        elif isinstance(doc, FullLine):
            stack.append((doc.doc, indent))
        elif doc is _ALIGN:
            # The second child of a Horz travels in the indent slot.
            second = indent
            stack.append((second, column))
        elif doc is _BREAK:
            out.newline(indent)
            column = indent
        else:
            raise InvalidArgument(
                f"Can't render {repr(doc)} of type {type(doc).__name__}, "
                "expected a Doc"
            )

    return column


def display(doc, width):
    """Pretty prints ``doc`` within ``width`` columns. Returns a list
    of lines without line terminators.

    ``doc`` is cast with ``cast_doc``, so strings and objects with a
    ``__pretty__`` method are accepted too."""
    out = LineBuffer()
    render(cast_doc(doc), out, 0, 0, width)
    lines = out.getlines()
    logger.debug('Rendered doc to %d line(s) at width %d', len(lines), width)
    return lines


def default_render_to_stream(stream, lines, newline='\n'):
    first = True
    for line in lines:
        if not first:
            stream.write(newline)
        stream.write(line)
        first = False


def default_render_to_str(lines, newline='\n'):
    stream = StringIO()
    default_render_to_stream(stream, lines, newline)
    return stream.getvalue()
