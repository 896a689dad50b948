"""Quote-aware argument splitting.

Pure Python, no framework dependencies.
"""

from typing import Iterable, List

QUOTE = '"'
SEPARATOR = " "


def parse_quotes(text: str) -> List[str]:
    """Split a command line into arguments, honouring double quotes.

    Runs of spaces outside quotes separate arguments and never produce
    empty ones. Inside quotes, spaces are kept. Opening or closing a quote
    also ends the argument collected so far, so ``d"e f"`` gives ``d``
    and ``e f``. An unterminated quote keeps what it collected.
    """
    args: List[str] = []
    current: List[str] = []
    inside = False

    for char in text:
        if char == QUOTE:
            inside = not inside
            if current:
                args.append("".join(current))
                current = []
        elif char == SEPARATOR and not inside:
            if current:
                args.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        args.append("".join(current))
    return args


def join_quotes(tokens: Iterable[str]) -> str:
    """Rebuild a command line that ``parse_quotes`` splits back into tokens.

    Tokens containing a space are wrapped in double quotes.
    """
    return SEPARATOR.join(
        f"{QUOTE}{token}{QUOTE}" if SEPARATOR in token else token
        for token in tokens
    )
