"""Truncation switches for the hierarchy expansions.

Every hierarchy reads a fixed subset of these switches. A switch is a
0/1 multiplier on one additive block of the closed-form expansion, so
turning it off removes exactly that block.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Union


class ExpansionFlag(IntEnum):
    """Named expansion switches."""

    xxMst = 1  # powers of the light/heavy mass ratio
    xxDmglst1 = 2  # Mgl - Mst1
    xxDmsqst1 = 3  # Msq - Mst1
    xxDmst12 = 4  # Mst1^2 - Mst2^2
    xxAt = 5  # powers of At
    xxlmMsusy = 6  # logarithms of MSUSY
    xxMsq = 7  # powers of 1/Msq
    xxMsusy = 8  # powers of 1/MSUSY
    xxDmglst2 = 9  # Mgl - Mst2
    xxDmsqst2 = 10  # Msq - Mst2
    xxMgl = 11  # powers of 1/Mgl
    xxDmsqst12 = 12  # Msq^2 - Mst1^2 averaged


class MissingFlagError(KeyError):
    """Raised when a hierarchy needs a switch the flag set does not define."""

    def __init__(self, flag: ExpansionFlag, hierarchy: Optional[str] = None):
        self.flag = flag
        self.hierarchy = hierarchy
        where = f" required by hierarchy '{hierarchy}'" if hierarchy else ""
        super().__init__(f"Expansion flag {ExpansionFlag(flag).name}{where} is not set")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return self.args[0]


FlagKey = Union[ExpansionFlag, str, int]


def _as_flag(key: FlagKey) -> ExpansionFlag:
    if isinstance(key, str):
        try:
            return ExpansionFlag[key]
        except KeyError:
            raise ValueError(f"Unknown expansion flag: {key}") from None
    return ExpansionFlag(key)


class ExpansionFlags(Mapping):
    """Immutable mapping from ExpansionFlag to 0 or 1.

    Lookups are total: `require` raises MissingFlagError for an absent
    switch instead of falling back to 0.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[FlagKey, int]] = None):
        parsed: Dict[ExpansionFlag, int] = {}
        for key, value in (values or {}).items():
            if value not in (0, 1):
                raise ValueError(f"Flag {key} must be 0 or 1, got {value}")
            parsed[_as_flag(key)] = int(value)
        self._values = MappingProxyType(parsed)

    @classmethod
    def all_on(cls, flags: Optional[Iterable[ExpansionFlag]] = None) -> "ExpansionFlags":
        """Flag set with every (or every given) switch enabled."""
        return cls({f: 1 for f in (flags if flags is not None else ExpansionFlag)})

    @classmethod
    def all_off(cls, flags: Optional[Iterable[ExpansionFlag]] = None) -> "ExpansionFlags":
        """Flag set with every (or every given) switch disabled."""
        return cls({f: 0 for f in (flags if flags is not None else ExpansionFlag)})

    def with_flag(self, flag: FlagKey, value: int) -> "ExpansionFlags":
        """Return a copy with one switch changed."""
        values = dict(self._values)
        values[_as_flag(flag)] = value
        return ExpansionFlags(values)

    def without(self, flag: FlagKey) -> "ExpansionFlags":
        """Return a copy with one switch removed."""
        values = dict(self._values)
        values.pop(_as_flag(flag), None)
        return ExpansionFlags(values)

    def require(self, flag: FlagKey, hierarchy: Optional[str] = None) -> int:
        """Return the value of a switch or raise MissingFlagError."""
        key = _as_flag(flag)
        try:
            return self._values[key]
        except KeyError:
            raise MissingFlagError(key, hierarchy) from None

    def __getitem__(self, key: FlagKey) -> int:
        return self.require(key)

    def __iter__(self) -> Iterator[ExpansionFlag]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k.name}={v}" for k, v in sorted(self._values.items()))
        return f"ExpansionFlags({inner})"
