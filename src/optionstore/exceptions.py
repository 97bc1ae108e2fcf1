"""
Exceptions raised by optionstore.
"""


class OptionStoreError(Exception):
    """Base class for all optionstore errors."""
    pass


class NotInitialized(OptionStoreError):
    """Raised when the configurator is used before init() was called."""
    pass


class InvalidPath(OptionStoreError):
    """Raised when init() receives an empty configuration path."""
    pass


class UnknownOption(OptionStoreError):
    """Raised when an option name is not registered in the library."""

    def __init__(self, name: str):
        super().__init__(f"Could not find option with the name {name} in configuration library")
        self.name = name


class MissingMetadata(OptionStoreError):
    """Raised when an enum member has no option descriptor."""
    pass


class StorageAccessDenied(OptionStoreError):
    """Raised when the backing store refuses access."""
    pass


class TypeConversionFailure(OptionStoreError):
    """Raised when a value cannot be converted to the requested type."""
    pass


class InvalidAdapter(OptionStoreError):
    """Raised when an adapter kind does not name a StorageAdapter."""
    pass
