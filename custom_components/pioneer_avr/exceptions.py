"""Exceptions for the Pioneer AVR client."""


class PioneerError(Exception):
    """Base exception for Pioneer client."""


class ValidationError(PioneerError):
    """Caller supplied a value the receiver does not accept."""


class OutOfRange(ValidationError):
    """Numeric value outside its allowed range."""


class UnknownInput(ValidationError):
    """Input name is not a known input selector."""


class UnknownMode(ValidationError):
    """Mode name is not valid for the sound setting."""


class TransportError(PioneerError):
    """Request could not be delivered or the receiver did not answer."""


class MalformedResponse(PioneerError):
    """Status payload could not be interpreted."""
