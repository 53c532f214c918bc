import re
from string import Formatter

from .api import cast_doc, horz_list, text, vert_list
from .doc import InvalidArgument

_formatter = Formatter()

_ARG_NAME = re.compile(r'[^.\[]*')


class _FieldNumbering:
    """Resolves template fields to arguments the way str.format does,
    including its refusal to mix ``{}`` with ``{0}``."""

    def __init__(self, args, kwargs):
        self.args = args
        self.kwargs = kwargs
        self.next_index = 0
        self.mode = None

    def _switch(self, mode):
        if self.mode is not None and self.mode != mode:
            raise InvalidArgument(
                f"cannot switch from {self.mode} field numbering "
                f"to {mode} field numbering"
            )
        self.mode = mode

    def resolve(self, field_name):
        arg_name = _ARG_NAME.match(field_name).group()
        if arg_name == '':
            self._switch('automatic')
            field_name = f'{self.next_index}{field_name}'
            self.next_index += 1
        elif arg_name.isdigit():
            self._switch('manual')

        try:
            value, _ = _formatter.get_field(field_name, self.args, self.kwargs)
        except (IndexError, KeyError, AttributeError, TypeError) as exc:
            raise InvalidArgument(
                f"No value for template field {repr(field_name)}: {exc}"
            ) from exc
        return value


def _parse(template):
    try:
        return list(_formatter.parse(template))
    except ValueError as exc:
        raise InvalidArgument(
            f"Malformed template {repr(template)}: {exc}"
        ) from exc

def pretty(template, *args, **kwargs):
    """Interprets a format string as a doc.

    Every line of ``template`` becomes a ``horz`` of its literal
    text and the values substituted into it, and the lines are
    joined with ``vert``. Values are inserted as docs (strings are
    wrapped with ``text``), so a multi-line value keeps its shape
    and is aligned at the column it starts on:

    >>> pretty('if ({}) {{\\n  {}\\n}}', 'a == b', 'a << 2').display(80)
    ['if (a == b) {', '  a << 2', '}']

    Format specs and conversions aren't supported.
    """
    lines = []
    line_parts = []
    numbering = _FieldNumbering(args, kwargs)

    for literal, field_name, format_spec, conversion in _parse(template):
        for i, part in enumerate(literal.split('\n')):
            if i != 0:
                lines.append(horz_list(line_parts))
                line_parts = []
            line_parts.append(text(part))

        if field_name is None:
            continue

        if format_spec or conversion:
            raise InvalidArgument(
                f"Template field {repr(field_name)} can't have a "
                "format spec or a conversion"
            )

        line_parts.append(cast_doc(numbering.resolve(field_name)))

    lines.append(horz_list(line_parts))
    return vert_list(lines)
