from typing import Optional


class FlashMasterError(Exception):
    """Base exception for flashmaster errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception


class EmptyInputError(FlashMasterError):
    """Raised when the input text is empty or the file could not be read."""

    pass


class NoValidRecordsError(FlashMasterError):
    """Raised when the input was read but no line produced a card record."""

    pass


class ContractViolationError(FlashMasterError):
    """Raised when the session API is used in a state it does not allow.

    This indicates a programming error in the caller, not bad user input.
    """

    pass


class EmptyDeckError(ContractViolationError):
    """Raised when a sampler or session is given zero records."""

    pass
