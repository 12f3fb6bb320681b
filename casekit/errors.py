class CaseConversionError(ValueError):
    """Base class for conversion failures reported by ``casekit.utils.strings``."""

    kind = "case_conversion_error"
    default_message = "Invalid input."

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidInputType(CaseConversionError, TypeError):
    kind = "invalid_input_type"
    default_message = "Invalid input: expected a string."


class NoValidWords(CaseConversionError):
    kind = "no_valid_words"
    default_message = "Invalid input: no valid words found."
