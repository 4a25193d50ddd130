class SlidecraftError(Exception):
    """Base for failures that end up as the single message shown above the form."""

    default_message = "Something went wrong. Please try again."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(SlidecraftError):
    default_message = "Input content is empty. Please provide text or a transcript."


class ClipboardError(SlidecraftError):
    NOT_SUPPORTED = "not_supported"
    NOT_ALLOWED = "not_allowed"
    EMPTY = "empty"

    MESSAGES = {
        NOT_SUPPORTED: "Could not access clipboard. Please paste manually (Ctrl+V).",
        NOT_ALLOWED: "Clipboard access denied. Please allow permissions or paste manually.",
        EMPTY: "Clipboard is empty.",
    }

    def __init__(self, kind: str):
        if kind not in self.MESSAGES:
            raise ValueError(f"unknown clipboard error kind: {kind!r}")
        self.kind = kind
        super().__init__(self.MESSAGES[kind])


class FileTypeError(SlidecraftError):
    UNSUPPORTED = "unsupported"
    EXTRACTION_RESTRICTED = "extraction_restricted"

    def __init__(self, kind: str, extension: str = ""):
        self.kind = kind
        self.extension = extension
        if kind == self.EXTRACTION_RESTRICTED:
            message = (
                f"Notice: Automated extraction for .{extension} is restricted. "
                "Please copy-paste the text content directly."
            )
        elif kind == self.UNSUPPORTED:
            message = "Unsupported file type. Please use a .txt file or paste text."
        else:
            raise ValueError(f"unknown file type error kind: {kind!r}")
        super().__init__(message)
