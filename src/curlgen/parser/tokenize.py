"""Shell-style tokenizer for curl command strings."""


def tokenize(text: str) -> list[str]:
    """Split a shell-quoted string into argument tokens.

    Honors single quotes, double quotes and backslash escapes. Only the
    literal space character separates tokens; an unterminated quote runs
    to the end of the input.
    """
    tokens: list[str] = []
    current = ""
    in_single = False
    in_double = False
    escaped = False

    for ch in text:
        if escaped:
            current += ch
            escaped = False
            continue

        if ch == "\\" and not in_single:
            escaped = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            continue

        if ch == " " and not in_single and not in_double:
            if current:
                tokens.append(current)
                current = ""
            continue

        current += ch

    if current:
        tokens.append(current)

    return tokens
