class PrettyDocError(Exception):
    pass


class InvalidText(PrettyDocError, ValueError):
    pass


class InvalidArgument(PrettyDocError, TypeError):
    pass


def is_doc(doc):
    if isinstance(doc, str):
        return True
    return isinstance(doc, Doc)


def _sum_widths(first, second):
    if first.flat_width is None or second.flat_width is None:
        return None
    return first.flat_width + second.flat_width


class Doc:
    """Base class of the six document nodes.

    Every node carries ``flat_width``: the width of the node when
    laid out on a single line, or ``None`` if it can't be. It is
    computed once in ``__init__`` from the children, which must
    already exist, so nodes can be shared freely between parents.
    """
    __slots__ = ('flat_width', )

    def __setattr__(self, name, value):
        raise AttributeError(
            f"{type(self).__name__} is immutable, can't set {name!r}"
        )

    def _init(self, flat_width, **fields):
        object.__setattr__(self, 'flat_width', flat_width)
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def display(self, width):
        """Lays out the doc within ``width`` columns and returns
        the output lines."""
        from .render import display
        return display(self, width)


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise InvalidArgument(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        # str.splitlines knows every line boundary, not just \n and \r.
        if value and value.splitlines() != [value]:
            raise InvalidText(
                f"Text can't contain line breaks, got {repr(value)}"
            )
        self._init(len(value), value=value)

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Horz(Doc):
    """Horizontal composition: line breaks inside ``second``
    return to the column where ``first`` ended."""
    __slots__ = ('first', 'second')

    def __init__(self, first, second):
        self._init(_sum_widths(first, second), first=first, second=second)

    def __repr__(self):
        return f'Horz({repr(self.first)}, {repr(self.second)})'


class Concat(Doc):
    """Plain concatenation: line breaks inside ``second`` return
    to the indentation in effect before ``first``."""
    __slots__ = ('first', 'second')

    def __init__(self, first, second):
        self._init(_sum_widths(first, second), first=first, second=second)

    def __repr__(self):
        return f'Concat({repr(self.first)}, {repr(self.second)})'


class Vert(Doc):
    __slots__ = ('first', 'second')

    def __init__(self, first, second):
        self._init(None, first=first, second=second)

    def __repr__(self):
        return f'Vert({repr(self.first)}, {repr(self.second)})'


class IfFlat(Doc):
    """Choice between two layouts.

    The renderer picks ``when_flat`` when its own ``flat_width``
    fits on the current line. The flat width exposed by the choice
    itself is the narrowest of the defined alternatives, so an
    enclosing choice may still consider this one flat even when
    ``when_flat`` is poisoned.
    """
    __slots__ = ('when_flat', 'when_broken')

    def __init__(self, when_flat, when_broken):
        flat_width = when_flat.flat_width
        broken_width = when_broken.flat_width
        if flat_width is None:
            width = broken_width
        elif broken_width is None:
            width = flat_width
        else:
            width = min(flat_width, broken_width)
        self._init(width, when_flat=when_flat, when_broken=when_broken)

    def __repr__(self):
        return (
            f'IfFlat(when_flat={repr(self.when_flat)}, '
            f'when_broken={repr(self.when_broken)})'
        )


class FullLine(Doc):
    """Renders ``doc`` unchanged, but is never considered flat."""
    __slots__ = ('doc', )

    def __init__(self, doc):
        self._init(None, doc=doc)

    def __repr__(self):
        return f'FullLine({repr(self.doc)})'
