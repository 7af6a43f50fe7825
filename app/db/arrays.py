"""Text codec for database-native array literals such as ``{a,"b,c"}``."""

from collections.abc import Iterable

# Characters that force an element to be written inside double quotes
_SPECIAL_CHARS = frozenset(',"{}')


def parse_array_literal(text: str) -> list[str]:
    """Decode a one-dimensional array literal into a list of strings.

    Only one leading ``{`` and one trailing ``}`` are stripped. A comma
    outside double quotes separates elements, a doubled quote (``""``)
    stands for one literal quote, and any other quote character toggles
    quoting without being emitted.

    The decoder is total: malformed input yields a best-effort result
    instead of an error.

    Args:
        text: Raw array literal as returned by the database

    Returns:
        Elements in source order; an empty list for ``""`` or ``{}``

    Example:
        >>> parse_array_literal('{"a,b",c}')
        ['a,b', 'c']
    """
    body = text
    if body.startswith("{"):
        body = body[1:]
    if body.endswith("}"):
        body = body[:-1]

    if not body:
        return []

    result: list[str] = []
    buf: list[str] = []
    in_quotes = False
    i = 0
    n = len(body)

    while i < n:
        ch = body[i]
        if ch == '"':
            if i + 1 < n and body[i + 1] == '"':
                buf.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            result.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
        i += 1

    if buf:
        result.append("".join(buf))

    return result


def _quote_element(value: str) -> str:
    if any(ch in _SPECIAL_CHARS or ch.isspace() for ch in value):
        return '"' + value.replace('"', '""') + '"'
    return value


def format_array_literal(values: Iterable[str]) -> str:
    """Encode strings as an array literal readable by ``parse_array_literal``.

    Args:
        values: Elements to encode, in order

    Returns:
        Literal text, ``{}`` for an empty iterable
    """
    return "{" + ",".join(_quote_element(str(v)) for v in values) + "}"
