"""Convert JSON schema keys to exported Go identifiers.

Keys arrive in whatever style the schema author picked. Words are
capitalised and well-known initialisms are upper-cased as a unit:

  id            -> ID
  user_id       -> UserID
  http_url      -> HTTPURL
  fooBar        -> FooBar
  _private_key  -> PrivateKey
  v1_2          -> V1_2
  content-type  -> Content_type
"""

from __future__ import annotations

# Only add entries that are highly unlikely to be ordinary words.
COMMON_INITIALISMS: frozenset[str] = frozenset({
    "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML", "HTTP",
    "HTTPS", "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS", "RPC", "SLA",
    "SMTP", "SSH", "TLS", "TTL", "UI", "UID", "UUID", "URI", "URL", "UTF8",
    "VM", "XML",
})


def _capitalize(word: str) -> str:
    """Upper-case the first character only."""
    return word[:1].upper() + word[1:]


def _fmt_word(word: str) -> str:
    upper = word.upper()
    if upper in COMMON_INITIALISMS:
        return upper
    if word.lower() == word:
        return _capitalize(word)
    return word


def _split_words(name: str) -> list[str]:
    """Split at lower->non-lower transitions and underscore runs.

    Underscore runs are dropped, except that one underscore survives
    between two digits; it then leads the following word.
    """
    runes = list(name)
    words: list[str] = []
    start = i = 0
    while i < len(runes):
        end_of_word = False
        if i + 1 == len(runes):
            end_of_word = True
        elif runes[i + 1] == "_":
            end_of_word = True
            n = 1
            while i + n + 1 < len(runes) and runes[i + n + 1] == "_":
                n += 1
            if (
                i + n + 1 < len(runes)
                and runes[i].isdigit()
                and runes[i + n + 1].isdigit()
            ):
                n -= 1
            del runes[i + 1:i + 1 + n]
        elif runes[i].islower() and not runes[i + 1].islower():
            end_of_word = True
        i += 1
        if end_of_word:
            words.append("".join(runes[start:i]))
            start = i
    return words


def _is_simple(name: str) -> bool:
    return all(c.islower() or c.isdigit() for c in name)


def _sanitize(name: str) -> str:
    """Replace non-identifier characters; the first one must be a letter."""
    chars = []
    for i, c in enumerate(name):
        ok = c.isalpha() if i == 0 else (c.isalpha() or c.isdigit())
        chars.append(c if ok else "_")
    return "".join(chars)


def format_name(raw: str) -> str:
    """Return the exported identifier for a schema key.

    Pure function of ``raw``; callers must not pass an empty string.
    """
    name = raw.lstrip("_")
    if not name:
        return "_"

    if _is_simple(name):
        upper = name.upper()
        name = upper if upper in COMMON_INITIALISMS else _capitalize(name)
    else:
        name = "".join(_fmt_word(word) for word in _split_words(name))

    return _sanitize(name)
