"""
Payload errors

Raised while turning external input into core objects. All of them are
ValueError subclasses; the HTTP adapter maps them to 400 responses.
"""


class InvalidActionError(ValueError):
    """Lift action payload has an unknown type or an illegal floor"""


class InvalidQueryError(ValueError):
    """Lift filter query parameter could not be parsed"""


class InvalidCallRequestError(ValueError):
    """Hall call payload is missing fields or has illegal values"""
