"""CLI utility functions."""


def sanitize_terminal_output(text: str) -> str:
    """Make text safe to write to a UTF-8 terminal.

    Directory names read from the file system carry undecodable bytes as
    surrogate escapes (U+DC80 to U+DCFF). Those cannot be encoded as UTF-8 and
    would make the console write fail, so they become U+FFFD instead.

    Args:
        text: Text that may contain surrogates

    Returns:
        Text with every surrogate replaced
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # Lone surrogates outside the escape range
        return text.encode("utf-8", "replace").decode("utf-8")
    return raw.decode("utf-8", "replace")
