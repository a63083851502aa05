class ValidationError(Exception):
    """Missing or invalid input, detected before any store call."""


class PersistenceError(Exception):
    """Any failure reported by the document store."""
