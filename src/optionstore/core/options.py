"""
Declarative option tables.

An OptionTable maps every member of an Enum to an OptionDescriptor, so an
application can declare its options once and refer to them by member:

    class Option(Enum):
        STYLE = auto()
        LANGUAGE = auto()

    OPTIONS = OptionTable(Option, {
        Option.STYLE: OptionDescriptor("Application:Style", default_value=0),
        Option.LANGUAGE: OptionDescriptor("Language", "us-US", path="Application:Localization"),
    })
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Tuple, Type

from ..exceptions import MissingMetadata
from .library import OptionLibrary
from .names import join_name


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionDescriptor:
    """Static declaration of one configuration option."""

    name: str
    default_value: Any = None
    path: Optional[str] = None
    value_type: Optional[type] = None
    non_persistent: bool = False

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Option name cannot be empty")
        if self.value_type is not None and self.default_value is not None:
            raise ValueError(
                f"Option {self.name} declares both a default value and a value type"
            )

    @property
    def full_name(self) -> str:
        """Normalized name including the group path."""
        return join_name(self.path, self.name)

    def register(self, library: OptionLibrary) -> bool:
        """Register this option in a library. Returns True if it was inserted."""
        if self.non_persistent:
            return library.add_non_persistent(self.full_name, self.default_value)
        if self.value_type is not None:
            return library.add_bare(self.full_name)
        return library.add(self.full_name, self.default_value)


class OptionTable:
    """Explicit mapping from the members of an Enum type to option descriptors."""

    def __init__(self, enum_type: Type[Enum], descriptors: Mapping[Enum, OptionDescriptor]):
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise TypeError(f"{enum_type!r} is not an Enum type")
        self.enum_type = enum_type
        self._descriptors = dict(descriptors)

        foreign = [member for member in self._descriptors if not isinstance(member, enum_type)]
        if foreign:
            raise TypeError(f"Descriptors given for members outside {enum_type.__name__}: {foreign}")

    def descriptor(self, member: Enum) -> OptionDescriptor:
        """
        Get the descriptor of a member.

        Raises:
            MissingMetadata: If the member has no descriptor
        """
        try:
            return self._descriptors[member]
        except KeyError:
            raise MissingMetadata(f"No option descriptor found on {member}") from None

    def name(self, member: Enum) -> str:
        return self.descriptor(member).full_name

    def __contains__(self, member: object) -> bool:
        return member in self._descriptors

    def scan(self) -> Iterator[Tuple[Enum, OptionDescriptor]]:
        """Yield (member, descriptor) in declaration order."""
        for member in self.enum_type:
            yield member, self.descriptor(member)

    def register(self, library: OptionLibrary) -> int:
        """
        Register every member's option in the library.

        All descriptors are resolved before anything is registered, so a
        missing descriptor leaves the library untouched.

        Returns:
            Number of options inserted
        """
        entries = list(self.scan())
        added = 0
        for member, descriptor in entries:
            if descriptor.register(library):
                added += 1
        logger.info(f"Registered {added} options from {self.enum_type.__name__}")
        return added

    def __repr__(self) -> str:
        return f"<OptionTable(enum={self.enum_type.__name__}, options={len(self._descriptors)})>"
