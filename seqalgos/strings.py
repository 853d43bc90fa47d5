"""String algorithms: character windows, vowel and word reversal, rotations."""

_VOWELS = frozenset("aeiouAEIOU")


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for end, ch in enumerate(s):
        previous = last_seen.get(ch)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[ch] = end
        best = max(best, end - start + 1)
    return best


def is_vowel(ch: str) -> bool:
    """Tell whether ``ch`` is one of the ASCII vowels, in either case."""
    return ch in _VOWELS


def reverse_vowels(s: str) -> str:
    """Return ``s`` with its vowels in reverse order and every other character in place."""
    chars = list(s)
    positions = [index for index, ch in enumerate(chars) if is_vowel(ch)]
    vowels = [chars[index] for index in positions]
    for index, ch in zip(positions, reversed(vowels)):
        chars[index] = ch
    return "".join(chars)


def reverse_words(s: str) -> str:
    """Reverse each space-separated word of ``s``, keeping the spaces where they are."""
    return " ".join(word[::-1] for word in s.split(" "))


def is_rotation(s: str, goal: str) -> bool:
    """Tell whether ``goal`` is a rotation of the non-empty string ``s``."""
    return bool(s) and len(s) == len(goal) and goal in s + s