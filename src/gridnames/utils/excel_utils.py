"""Column letter conversions for A1-style addresses."""


def get_column_letter(col: int) -> str:
    """Convert a 0-based column index to Excel letters (0 -> 'A', 26 -> 'AA')."""
    if col < 0:
        raise ValueError(f"Column index must be non-negative, got {col}")
    result = ""
    while col >= 0:
        result = chr(col % 26 + ord("A")) + result
        col = col // 26 - 1
    return result


def column_index_from_letter(letters: str) -> int:
    """Convert Excel column letters to a 0-based index ('A' -> 0, 'aa' -> 26).

    Letters are bijective base 26 with no zero digit, so 'Z' is 26 and 'AA' is 27
    before the shift to 0-based.
    """
    if not letters:
        raise ValueError("Column letters must not be empty")
    index = 0
    for char in letters.upper():
        if not "A" <= char <= "Z":
            raise ValueError(f"Invalid column letter: {char!r}")
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index - 1
