from functools import reduce

from .doc import (
    Concat,
    Doc,
    FullLine,
    Horz,
    IfFlat,
    InvalidArgument,
    Text,
    Vert,
)


def text(x):
    """Wraps the str ``x`` as an atomic doc. ``x`` must not contain
    line breaks."""
    return Text(x)


def cast_doc(doc):
    """Casts value to doc, if possible.

    Docs are returned as is and strings are wrapped with ``text``.
    Other objects may define ``__pretty__``, a method taking no
    arguments that returns a Doc.
    """
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        return Text(doc)

    pretty_method = getattr(doc, '__pretty__', None)
    if pretty_method is None or not callable(pretty_method):
        raise InvalidArgument(
            f"Expected a Doc, a str or an object with a __pretty__ "
            f"method, got {repr(doc)} of type {type(doc).__name__}"
        )

    res = pretty_method()
    if not isinstance(res, Doc):
        raise InvalidArgument(
            f"__pretty__ of {type(doc).__name__} returned {repr(res)} "
            f"of type {type(res).__name__}, expected a Doc"
        )
    return res


def _fold(cls, docs):
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return Text('')
    return reduce(cls, docs)


def horz_list(docs):
    """Returns the horizontal composition of the documents in the
    iterable argument. Line breaks in each document return to the
    column where the previous one ended."""
    return _fold(Horz, docs)


def vert_list(docs):
    """Returns the documents in the iterable argument stacked
    on top of each other, each starting on a new line."""
    return _fold(Vert, docs)


def concat_list(docs):
    """Returns the concatenation of the documents in the iterable
    argument. Line breaks in each document return to the
    indentation of the whole."""
    return _fold(Concat, docs)


def horz(*docs):
    return horz_list(docs)


def vert(*docs):
    return vert_list(docs)


def concat(*docs):
    return concat_list(docs)


def if_flat(when_flat, when_broken):
    """Gives the layout algorithm two options. ``when_flat`` is used
    when it fits on the rest of the current line, ``when_broken``
    otherwise."""
    return IfFlat(cast_doc(when_flat), cast_doc(when_broken))


def full_line(doc):
    """Renders ``doc`` as is, but marks it as never fitting on a
    single line. An enclosing ``if_flat`` whose flat alternative
    contains it always picks the broken alternative, which keeps
    anything else from being laid out after ``doc`` on its line."""
    return FullLine(cast_doc(doc))
