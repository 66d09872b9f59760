"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DocumentStoreError(DomainException):
    """Document store returned an error, refused the query, or is unavailable"""

    pass


class InvalidTransactionDataError(DocumentStoreError):
    """Stored transaction document is malformed or invalid"""

    pass


class InvalidFilterError(DomainException):
    """Unknown type filter or date range requested for the table"""

    pass
