"""Machine identity derivation for MachineSync."""
from .source import IdHashInput, StaticDescriptor, SystemAndSalt, collect
from .system_id import ID_SCHEME_VERSION, IdHasher, SystemId, derive, is_valid_system_id

__all__ = [
    "ID_SCHEME_VERSION",
    "IdHashInput",
    "IdHasher",
    "StaticDescriptor",
    "SystemAndSalt",
    "SystemId",
    "collect",
    "derive",
    "is_valid_system_id",
]
