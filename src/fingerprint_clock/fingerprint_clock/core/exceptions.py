class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "DomainError"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "ValidationError"


class CaptureTimeout(DomainError):
    """No sample arrived from the reader within the capture window."""

    code = "CaptureTimeout"


class CaptureCancelled(CaptureTimeout):
    """A pending capture was cancelled before a sample arrived."""

    code = "CaptureCancelled"


class DeviceError(DomainError):
    """The reader could not be found or refused to start acquisition."""

    code = "DeviceError"


class SessionBusy(DomainError):
    """A capture is already in flight on this session."""

    code = "SessionBusy"


class ConfirmationMismatch(DomainError):
    """The two enrollment captures do not agree."""

    code = "ConfirmationMismatch"


class DuplicateTemplate(DomainError):
    """An active employee already owns this exact template."""

    code = "DuplicateTemplate"


class NoMatch(DomainError):
    """No enrolled employee matches the captured template."""

    code = "NoMatch"


class StoreUnavailable(DomainError):
    """A repository call failed."""

    code = "StoreUnavailable"


class EmployeeNotFound(ValidationError):
    """No employee with the requested id."""

    code = "EmployeeNotFound"
