"""
Document pipeline exceptions.

Not-found and unsupported-state outcomes are not exceptions: the assembler
logs them and returns no document. Everything here propagates to the caller.
"""


class DocumentError(Exception):
    """Base exception for all appdocs errors."""
    pass


class DataIntegrityError(DocumentError):
    """
    Raised when an application record cannot produce a well-formed document.

    Examples: an in-review application without its review record, a review
    with an empty reason, an applicant with a blank first name or surname.
    """
    def __init__(self, message: str, application_id=None, field: str = None):
        self.application_id = application_id
        self.field = field
        super().__init__(message)


class MissingCollaboratorError(DocumentError, ValueError):
    """Raised at construction time when a required collaborator is None."""
    def __init__(self, collaborator: str):
        self.collaborator = collaborator
        super().__init__(f"Required collaborator '{collaborator}' is missing")


class ConfigurationError(DocumentError):
    """
    Raised when rendering configuration is invalid.

    This includes unknown template keys and missing template directories.
    """
    pass


class ContractViolationError(DocumentError):
    """Raised when a stored application record fails its JSON Schema contract."""
    def __init__(self, message: str, path: str = None):
        self.path = path
        super().__init__(message)
