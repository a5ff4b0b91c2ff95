__all__ = ["Code"]


from enum import Enum


class Code(Enum):
    """
    Enumeration of syncfetch error codes.
    """

    MALFORMED_URL = "malformed_url"
    """The string could not be decomposed into URL components."""

    INVALID_COMPONENT = "invalid_component"
    """A component value, such as a response status, is not acceptable."""

    INVALID_BODY_FOR_METHOD = "invalid_body_for_method"
    """A body was supplied for a method that cannot carry one (GET, HEAD)."""

    TRANSPORT_FAULT = "transport_fault"
    """The blocking network exchange failed before a reply was read."""
