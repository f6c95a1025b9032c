"""Exceptions raised by the editor core.

User input problems are not exceptions; they come back as check results and
are shown through the host's notifier.
"""


class EditorError(Exception):
    """Base class for editor core errors."""


class PricingError(EditorError):
    """The price source or pricing call was given something it cannot price."""


class ConfirmationAlreadyResolved(EditorError):
    """A pending confirmation was answered more than once."""
