"""Bracket balance checking."""

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_balanced(text: str) -> bool:
    """Return True when every (), [] and {} in ``text`` is properly nested and closed.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack[-1] != _PAIRS[char]:
                return False
            stack.pop()
    return not stack