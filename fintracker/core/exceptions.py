"""
Custom exceptions
"""


class NotFoundError(Exception):
    """Budget, transaction or category not found for the requesting user"""
    pass


class BadRequestError(Exception):
    """Missing field, duplicate category or invalid value"""
    pass


class UnauthenticatedError(Exception):
    """Request arrived without a user identity"""
    pass


class CurrencyConversionError(Exception):
    """Error converting an amount between currencies"""
    pass


class FirestoreError(Exception):
    """Error in Firestore operations"""
    pass
