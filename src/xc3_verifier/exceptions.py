"""Custom exception hierarchy for the XC3 verifier."""


class XC3VerifierError(Exception):
    """Base exception for all verifier errors."""


class InsufficientInputError(XC3VerifierError):
    """No analysable documents were supplied for a verification call."""


class AnalysisError(XC3VerifierError):
    """Error while analysing a single document."""


class EmptyDocumentError(AnalysisError):
    """Document has no content."""


class UnsupportedDocumentType(AnalysisError):
    """Declared MIME type is outside the allow-list. Advisory only."""

    def __init__(self, mime_type: str) -> None:
        super().__init__(f"Unsupported document type '{mime_type}'")
        self.mime_type = mime_type


class AnalysisTimeout(AnalysisError):
    """Document analysis did not finish before its deadline."""

    def __init__(self, file_name: str, timeout_s: float) -> None:
        super().__init__(f"Analysis of '{file_name}' exceeded {timeout_s}s")
        self.file_name = file_name
        self.timeout_s = timeout_s
