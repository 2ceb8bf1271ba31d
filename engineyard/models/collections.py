"""
Named Collections

Lists of apps or environments with name matching.
"""

from typing import Generic, Optional, TypeVar

from engineyard.exceptions import (
    AmbiguousAppNameError,
    AmbiguousEnvironmentNameError,
    InvalidAppError,
    NoEnvironmentError,
)

T = TypeVar("T")


class NamedCollection(list, Generic[T]):
    """
    A list of named API objects.

    Lookups prefer an exact name. Otherwise a name fragment matches when it
    is a substring of exactly one member name.
    """

    def named(self, name: str) -> Optional[T]:
        """Return the member called exactly ``name``."""
        for item in self:
            if item.name == name:
                return item
        return None

    def match_one(self, name_part: str) -> Optional[T]:
        """
        Return the exact or unambiguous substring match.

        Raises:
            The collection's ambiguous-name error if several names contain
            ``name_part``.
        """
        exact = self.named(name_part)
        if exact is not None:
            return exact

        candidates = [item for item in self if name_part in item.name]
        if len(candidates) > 1:
            raise self.ambiguous_error(name_part, [item.name for item in candidates])
        return candidates[0] if candidates else None

    def match_one_or_raise(self, name_part: str) -> T:
        """Like match_one, but a missing match raises the collection's not-found error."""
        match = self.match_one(name_part)
        if match is None:
            raise self.not_found_error(name_part)
        return match

    def ambiguous_error(self, name_part: str, matches: list[str]) -> Exception:
        raise NotImplementedError

    def not_found_error(self, name_part: str) -> Exception:
        raise NotImplementedError


class AppCollection(NamedCollection):
    """Apps visible to the current account."""

    def ambiguous_error(self, name_part: str, matches: list[str]) -> Exception:
        return AmbiguousAppNameError(name_part, matches)

    def not_found_error(self, name_part: str) -> Exception:
        return InvalidAppError(name_part)


class EnvironmentCollection(NamedCollection):
    """Environments visible to the current account or linked to an app."""

    def ambiguous_error(self, name_part: str, matches: list[str]) -> Exception:
        return AmbiguousEnvironmentNameError(name_part, matches)

    def not_found_error(self, name_part: str) -> Exception:
        return NoEnvironmentError(name_part)
