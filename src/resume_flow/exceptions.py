"""Errors raised while turning resume text into a document."""


class ResumeError(Exception):
    """Base class for resume-flow errors."""


class ResumeParseError(ResumeError, ValueError):
    """Input could not be turned into a document."""


class MalformedInputError(ResumeParseError):
    """The input is not valid syntax for its declared format."""

    def __init__(self, fmt: str, detail: str) -> None:
        self.format = fmt
        self.detail = detail
        super().__init__(f"Invalid {fmt.upper()}: {detail}")


class MissingNameError(ResumeParseError):
    """No candidate name could be derived from the input."""

    def __init__(self, message: str = "Invalid resume format: Missing name field") -> None:
        super().__init__(message)


class EmptyDocumentError(MissingNameError):
    """The input holds no document at all."""

    def __init__(self, message: str = "Invalid format: Empty document") -> None:
        super().__init__(message)


class UnsupportedFormatError(ResumeParseError):
    """The requested format label is not one of the known formats."""

    def __init__(self, fmt: object) -> None:
        self.format = fmt
        super().__init__(f"Unsupported format: {fmt}")
