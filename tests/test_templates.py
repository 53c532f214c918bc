import pytest

from prettydoc import InvalidArgument, if_flat, pretty, text, vert


def test_magic_template():
    one = text('1')
    two = text('2')
    assert pretty('aaaa {}\nb\n  {}', one, two).display(10) == [
        'aaaa 1',
        'b',
        '  2',
    ]


def test_template_example():
    c = 'a == b'
    t = 'a << 2'
    e = 'a + b'
    doc = pretty('if ({}) {{\n  {}\n}} else {{\n  {}\n}}', c, t, e)
    assert doc.display(80) == [
        'if (a == b) {',
        '  a << 2',
        '} else {',
        '  a + b',
        '}',
    ]


def test_named_and_numbered_fields():
    doc = pretty('{name} = {0}; {0}', 'x', name='y')
    assert doc.display(80) == ['y = x; x']


def test_multiline_values_align_at_their_column():
    doc = pretty('let {} in', vert('a = 1', 'b = 2'))
    assert doc.display(80) == ['let a = 1', '    b = 2 in']


def test_plain_template():
    assert pretty('').display(10) == ['']
    assert pretty('no fields').display(10) == ['no fields']
    assert pretty('a\n\nb').display(10) == ['a', '', 'b']


def test_missing_value():
    with pytest.raises(InvalidArgument):
        pretty('{} {}', 'a')
    with pytest.raises(InvalidArgument):
        pretty('{missing}')


def test_format_spec_is_rejected():
    with pytest.raises(InvalidArgument):
        pretty('{:>10}', 'a')
    with pytest.raises(InvalidArgument):
        pretty('{!r}', 'a')


def test_mixing_manual_and_automatic_numbering():
    with pytest.raises(InvalidArgument):
        pretty('{0} {}', 'a', 'b')
    with pytest.raises(InvalidArgument):
        pretty('{} {0}', 'a', 'b')


def test_named_fields_mix_with_either_numbering():
    assert pretty('{} {x} {}', 'a', 'b', x='c').display(80) == ['a c b']


def test_field_lookups():
    assert pretty('{0[1]} {pair[0]}', ['a', 'b'], pair=('c',)).display(80) == [
        'b c'
    ]


@pytest.mark.parametrize('template, args', [
    ('{0.nope}', ('x',)),
    ('{0[x]}', ('abc',)),
    ('a }', ()),
    ('{', ()),
    ('{0', ('x',)),
])
def test_malformed_templates(template, args):
    with pytest.raises(InvalidArgument):
        pretty(template, *args)


def test_values_must_be_docs():
    with pytest.raises(InvalidArgument):
        pretty('{}', 42)


def binop(left, op, right):
    return if_flat(
        pretty('{} {} {}', left, op, right),
        pretty('{}\n{} {}', left, op, right),
    )


def ifte2(c, t, e):
    return if_flat(
        pretty('if ({}) {{ {} }} else {{ {} }}', c, t, e),
        pretty('if ({}) {{\n  {}\n}} else {{\n  {}\n}}', c, t, e),
    )


def doc_example():
    return ifte2(
        binop('a', '==', 'b'),
        binop('a', '<<', '2'),
        binop('a', '+', 'b'),
    )


def test_documentation_example():
    assert doc_example().display(37) == [
        'if (a == b) { a << 2 } else { a + b }'
    ]
    assert doc_example().display(35) == [
        'if (a == b) {',
        '  a << 2',
        '} else {',
        '  a + b',
        '}',
    ]


def opt_break(x, y):
    return if_flat(
        pretty('{} {}', x, y),
        pretty('{}\n  {}', x, y),
    )


def ifte(c, t, e):
    return if_flat(
        pretty('if {} then {} else {}', c, t, e),
        vert(
            opt_break(text('if'), c),
            opt_break(text('then'), t),
            opt_break(text('else'), e),
        ),
    )


def test_if_then_else():
    doc = ifte(
        binop('a', '==', 'b'),
        binop('a', '<<', '2'),
        binop('a', '+', 'b'),
    )
    assert doc.display(32) == ['if a == b then a << 2 else a + b']
    assert doc.display(15) == ['if a == b', 'then a << 2', 'else a + b']
    assert doc.display(10) == ['if a == b', 'then', '  a << 2', 'else a + b']


def show_func(name, args, body):
    header = pretty('fun {}({}):', name, args)
    on_one_line = pretty('{} {} end', header, body)
    on_multiple_lines = pretty('{}\n    {}\nend', header, body)
    return if_flat(on_one_line, on_multiple_lines)


def test_function_example():
    doc = show_func('greet', 'name', '"Welcome back, " + name')
    assert doc.display(80) == ['fun greet(name): "Welcome back, " + name end']
    assert doc.display(40) == [
        'fun greet(name):',
        '    "Welcome back, " + name',
        'end',
    ]
