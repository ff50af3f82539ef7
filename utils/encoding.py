"""Encoding helpers"""

BOM = "\ufeff"


def decode_text(raw: bytes, encoding: str) -> str:
    """
    Strictly decode raw bytes, dropping a leading byte order mark

    Args:
        raw: File content
        encoding: Codec name

    Returns:
        Decoded text

    Raises:
        UnicodeDecodeError: content is not valid in this encoding
        LookupError: unknown codec name
    """
    text = raw.decode(encoding, errors="strict")
    if text.startswith(BOM):
        text = text[len(BOM):]
    return text
