"""Domain enumerations: the search engine collections this system fronts."""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Collection(_ValuesMixin, str, Enum):
    """Named document collection (engine index) that can be searched."""

    PACKAGES = "packages"
    SERVICES = "services"
    TIMERS = "timers"

    @property
    def is_unit(self) -> bool:
        """True for collections holding systemd unit files."""
        return self is not Collection.PACKAGES


class UnitCollection(_ValuesMixin, str, Enum):
    """Unit file collections whose documents can be downloaded."""

    SERVICES = "services"
    TIMERS = "timers"

    @property
    def unit_type(self) -> str:
        """Fixed tag sent as x-unit-type on downloads (e.g. 'service')."""
        return _UNIT_TYPES[self]


_UNIT_TYPES = {
    UnitCollection.SERVICES: "service",
    UnitCollection.TIMERS: "timer",
}
