"""Domain exceptions raised by services.

Services raise these instead of returning ``None`` or error values.
The exception handlers registered in main.py are the only place they
become HTTP responses, so endpoints never branch on them.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist.

    The message names only the entity ("Bird not found"); the identifier
    is kept as an attribute for logging.
    """

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found")
