from .api import (
    cast_doc,
    concat,
    horz,
    horz_list,
    if_flat,
    text,
    vert,
    vert_list,
)
from .utils import intersperse


def wrap(words, sep=' ', vert_sep=''):
    """Word wrap. Lays out ``words`` separated by ``sep``, starting
    a new line, ended by ``vert_sep``, before any word that doesn't
    fit on the current one. Neither separator may contain line
    breaks."""
    words = [cast_doc(word) for word in words]
    if not words:
        return text('')

    paragraph = words[0]
    for word in words[1:]:
        paragraph = concat(
            paragraph,
            if_flat(horz(sep, word), vert(vert_sep, word))
        )
    return paragraph


def sep_by(items, sep=' ', vert_sep=''):
    """Lays out ``items`` either on one line joined by ``sep``, or
    one per line with ``vert_sep`` ending every line but the last."""
    items = [cast_doc(item) for item in items]
    vert_items = [
        item if i == len(items) - 1 else horz(item, vert_sep)
        for i, item in enumerate(items)
    ]
    return if_flat(
        horz_list(intersperse(sep, items)),
        vert_list(vert_items)
    )


def parens(center):
    return horz('(', center, ')')
