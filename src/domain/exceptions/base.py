"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Carries what the API envelope needs: a machine code for logs, the
    error category shown to clients and the HTTP status to answer with.
    """

    status_code: int = 400
    error: str = "Bad request"

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
