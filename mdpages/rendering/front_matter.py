from mdpages.rendering.schemas import FrontMatter

DELIMITER = "---"


def parse_metadata_line(line: str) -> tuple[str, str]:
    # Only the piece between the first and second colon is kept as the value
    parts = line.strip().split(":")
    key = parts[0].strip()
    value = parts[1].strip() if len(parts) > 1 else ""
    return key, value


def parse_front_matter(text: str) -> FrontMatter:
    """Split a leading ``---`` delimited block of ``key: value`` lines off text.

    Without an opening delimiter, or without a closing one, the whole
    (trimmed) text is the body and the metadata is empty.
    """
    text = text.strip()

    if not text.startswith(DELIMITER):
        return FrontMatter(metadata={}, body=text)

    remainder = text[len(DELIMITER) :]
    if DELIMITER not in remainder:
        return FrontMatter(metadata={}, body=text)

    block, body = remainder.split(DELIMITER, 1)
    metadata = dict(
        parse_metadata_line(line) for line in block.split("\n") if line.strip()
    )

    return FrontMatter(metadata=metadata, body=body.strip())
