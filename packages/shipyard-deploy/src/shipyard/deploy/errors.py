"""
Errors raised by shipyard.deploy.
"""


class DeployError(Exception):
    """Base exception for deploy utilities."""

    pass


class DelimitedEntryError(DeployError, ValueError):
    """A "key=value" entry could not be parsed.

    Attributes:
        entry: The raw entry as the user supplied it
    """

    def __init__(self, message: str, entry: str):
        self.entry = entry
        super().__init__(message)


class MalformedPairError(DelimitedEntryError):
    """Entry has no '=' separator."""

    pass


class EmptyKeyError(DelimitedEntryError):
    """Entry has a blank key."""

    pass


class EmptyValueError(DelimitedEntryError):
    """Entry has a blank value."""

    pass


class UnrecoverableError(DeployError):
    """The command cannot continue. Callers should terminate."""

    pass


class LocationParseError(UnrecoverableError):
    """Output root is not a valid location reference."""

    def __init__(self, root: str, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"invalid output location {root!r}: {reason}")


class ClientsError(DeployError):
    """Failed to construct the client bundle."""

    pass


class DeployerError(DeployError):
    """Failed to create a Deployer."""

    pass
