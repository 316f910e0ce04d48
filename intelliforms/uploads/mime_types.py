from intelliforms.exceptions import InvalidExtension

ALLOWED_FILE_TYPES: dict[str, str] = {
    ".txt": "text/plain",
    ".pdf": "application/pdf",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024


def normalize_extension(extension: str) -> str:
    """Lowercase an extension and make sure it starts with a dot."""
    ext = extension.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


def is_allowed_extension(extension: str) -> bool:
    return normalize_extension(extension) in ALLOWED_FILE_TYPES


def mime_type_for(extension: str) -> str:
    """Return the MIME type bound to an allowed extension.

    Raises:
        InvalidExtension: if the extension is not in the allow-set.
    """
    mime_type = ALLOWED_FILE_TYPES.get(normalize_extension(extension))
    if mime_type is None:
        raise InvalidExtension(
            f"File extension not allowed: {extension!r}. "
            f"Valid extensions: {', '.join(ALLOWED_FILE_TYPES)}"
        )
    return mime_type
