"""
Contract violation errors.

These signal a misconfigured robot description discovered during setup.
They are programmer errors and are not meant to be caught and retried.
"""


class RegistrationError(RuntimeError):
    """A component was registered more than once."""


class DuplicateNameError(RegistrationError):
    """A second component was registered under an existing name."""


class UnknownComponentError(KeyError):
    """Lookup of a component name that was never registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
