from intelliforms.exceptions import ClientInputError, IntelliFormsError


class ExtractionError(IntelliFormsError):
    """Raised when text cannot be extracted from a document.

    Download and parser failures are chained as ``__cause__``.
    """


class MissingExtension(ExtractionError, ClientInputError):
    """Raised when a file name has no extension to dispatch on."""


class UnsupportedFileType(ExtractionError, ClientInputError):
    """Raised when no reader handles the file extension."""


class PdfExtractionError(ExtractionError):
    """Raised when the PDF engine fails."""


class DocumentReadError(ExtractionError):
    """Raised when a Word document cannot be parsed."""


class OcrError(ExtractionError):
    """Raised when the OCR engine fails."""


class EmptyDocumentError(ExtractionError):
    """Raised when extraction succeeds but yields no text."""
