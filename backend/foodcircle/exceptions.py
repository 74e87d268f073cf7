"""
Food Circle Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the few error outcomes the API has.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       JSON responses with the matching HTTP status code.
Who:   Raised by the auth gate and the services; caught by global handlers.

Exception Hierarchy:
    FoodCircleError (base)
    ├── UnauthorizedError   → 401 (missing or invalid session cookie)
    ├── ForbiddenError      → 403 (valid session, wrong identity)
    └── DatabaseError       → 500 (driver failure, malformed identifier)

A missing document is not an error here: single-document reads answer
`null` with HTTP 200, which is what existing clients expect.
"""

from typing import Any, Dict, Optional


class FoodCircleError(Exception):
    """
    Base exception for all Food Circle application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthorizedError(FoodCircleError):
    """
    Raised by the auth gate when a request carries no usable session.

    When:    No `token` cookie, bad signature, expired token, or a token
             without an email claim.
    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Unauthorized access.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(FoodCircleError):
    """
    Raised when the session email does not match the identity a route targets.

    When:    POST /foods for another donator, GET /food-manage/{email} or
             GET /my-request/{email} for someone else.
    HTTP:    403 Forbidden
    """

    def __init__(
        self,
        message: str = "Forbidden access",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(FoodCircleError):
    """
    Raised when a MongoDB operation fails or cannot be issued.

    When:    Connection lost, server selection timeout, write error, or a path
             identifier that is not a valid ObjectId.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. Driver error
        text (host names, query shapes) is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
