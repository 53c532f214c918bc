_COLOR_DEPS_INSTALLED = True
try:
    from pygments import styles
    from pygments.lexers import get_lexer_by_name
    from pygments.lexers.special import TextLexer
except ImportError:
    _COLOR_DEPS_INSTALLED = False
else:
    default_style = styles.get_style_by_name('monokai')

try:
    import colorful
except ImportError:
    _COLOR_DEPS_INSTALLED = False


def styleattrs_to_colorful(attrs):
    c = colorful.reset
    if attrs['color'] or attrs['bgcolor']:
        # Colorful doesn't have a way to directly set Hex/RGB
        # colors- until I find a better way, we do it like this :)
        accessor = ''
        if attrs['color']:
            colorful.update_palette({'prettydocCurrFg': '#' + attrs['color']})
            accessor = 'prettydocCurrFg'
        if attrs['bgcolor']:
            colorful.update_palette({'prettydocCurrBg': '#' + attrs['bgcolor']})
            if accessor:
                accessor += '_on_prettydocCurrBg'
            else:
                accessor = 'on_prettydocCurrBg'
        c &= getattr(colorful, accessor)
    if attrs['bold']:
        c &= colorful.bold
    if attrs['italic']:
        c &= colorful.italic
    if attrs['underline']:
        c &= colorful.underlined
    return c


def get_lexer(lexer=None):
    # Lexers must not add or strip newlines, so that the tokens
    # add up to exactly the rendered text.
    if lexer is None:
        return TextLexer(stripnl=False, ensurenl=False)
    if isinstance(lexer, str):
        return get_lexer_by_name(lexer, stripnl=False, ensurenl=False)
    return lexer


def colored_render_to_stream(
    stream,
    lines,
    lexer=None,
    style=None,
    newline='\n'
):
    """Writes the rendered ``lines`` to ``stream``, highlighted with
    the pygments ``lexer`` (an instance, or a lexer name such as
    ``'scheme'``) in the colors of the pygments ``style``.

    Lexer instances should be created with ``stripnl=False`` and
    ``ensurenl=False`` to keep the output text intact.
    """
    if not _COLOR_DEPS_INSTALLED:
        raise ImportError(
            "'pygments' and 'colorful' packages must be "
            "installed to use colored output."
        )

    if style is None:
        style = default_style
    elif isinstance(style, str):
        style = styles.get_style_by_name(style)

    # pygments normalizes line endings, so lex with \n and translate
    # when writing.
    source = '\n'.join(lines)
    wrote_color = False

    for ttype, value in get_lexer(lexer).get_tokens(source):
        if not value:
            continue
        color = styleattrs_to_colorful(style.style_for_token(ttype))
        stream.write(str(color))
        stream.write(value.replace('\n', newline))
        wrote_color = True

    if wrote_color:
        stream.write(str(colorful.reset))
