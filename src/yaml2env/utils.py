"""Text utilities shared by the manifest and source readers."""


def split_lines(text: str) -> list[str]:
    """Split text on newlines, dropping a trailing carriage return from each line.

    A trailing newline does not produce a final empty line and an empty text has
    no lines at all. Unlike `str.splitlines`, form feeds, vertical tabs and other
    unicode line boundaries are kept as part of the line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
