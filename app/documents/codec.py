import base64


def encode_to_text(data: bytes) -> str:
    """Encode a binary payload as standard base64 text."""
    return base64.b64encode(data).decode("ascii")


def decode_from_text(text: str) -> bytes:
    """Decode base64 text back to bytes.

    Raises:
        binascii.Error: if text is not valid base64.
    """
    return base64.b64decode(text, validate=True)
