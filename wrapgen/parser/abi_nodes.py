"""
ABI node definitions.

This module contains the dataclasses representing a decoded contract ABI:
the contract itself, its entries (constructor, events, functions), their
inputs/outputs and the data types those carry.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


# =============================================================================
# DATA TYPES
# =============================================================================

class DataTypeKind(Enum):
    """Enumeration of the ABI data types the generator distinguishes."""

    UINT256 = 'uint256'
    UINT8 = 'uint8'
    UINT8_ARRAY = 'uint8[]'
    UINT256_ARRAY = 'uint256[]'
    STRING = 'string'
    ADDRESS = 'address'
    BOOL = 'bool'
    # Named internal types, the name is carried in DataType.name
    CONTRACT = 'contract'
    ENUM = 'enum'
    # Anything else, the raw type string is carried in DataType.name
    OTHER = 'other'


# Raw type keywords that map directly to a kind
KEYWORD_KINDS = {
    kind.value: kind
    for kind in DataTypeKind
    if kind not in (DataTypeKind.CONTRACT, DataTypeKind.ENUM, DataTypeKind.OTHER)
}

CONTRACT_PREFIX = 'contract '
ENUM_PREFIX = 'enum '


@dataclass(frozen=True)
class DataType:
    """A decoded ABI type (e.g., uint256, contract Token, tuple)."""
    kind: DataTypeKind
    name: str = ''

    @classmethod
    def from_raw(cls, raw: str) -> 'DataType':
        """Decode a raw ABI type string. Never fails.

        Known keywords map to their fixed kind, "contract X" and "enum X"
        map to CONTRACT/ENUM named X, and everything else is kept verbatim
        as OTHER.
        """
        if raw in KEYWORD_KINDS:
            return cls(KEYWORD_KINDS[raw])
        if raw.startswith(CONTRACT_PREFIX):
            return cls(DataTypeKind.CONTRACT, raw[len(CONTRACT_PREFIX):])
        if raw.startswith(ENUM_PREFIX):
            return cls(DataTypeKind.ENUM, raw[len(ENUM_PREFIX):])
        return cls(DataTypeKind.OTHER, raw)

    def __str__(self) -> str:
        if self.kind == DataTypeKind.CONTRACT:
            return f'{CONTRACT_PREFIX}{self.name}'
        if self.kind == DataTypeKind.ENUM:
            return f'{ENUM_PREFIX}{self.name}'
        if self.kind == DataTypeKind.OTHER:
            return self.name
        return self.kind.value


class StateMutability(Enum):
    """State mutability of a function or constructor."""
    NON_PAYABLE = 'nonpayable'
    VIEW = 'view'
    PURE = 'pure'


# =============================================================================
# INPUTS AND OUTPUTS
# =============================================================================

@dataclass
class FuncIO:
    """A function input or output. The name may be empty."""
    name: str
    io_type: DataType
    internal_type: DataType


@dataclass
class EventInput(FuncIO):
    """An event input, which may be indexed."""
    indexed: bool = False


# =============================================================================
# ENTRIES
# =============================================================================

@dataclass
class AbiEntry:
    """Base class for all ABI entries."""
    pass


@dataclass
class ConstructorEntry(AbiEntry):
    """Represents the constructor of a contract."""
    inputs: List[FuncIO] = field(default_factory=list)
    mutability: StateMutability = StateMutability.NON_PAYABLE


@dataclass
class EventEntry(AbiEntry):
    """Represents an event declaration."""
    name: str
    anonymous: bool = False
    inputs: List[EventInput] = field(default_factory=list)


@dataclass
class FunctionEntry(AbiEntry):
    """Represents a callable function."""
    name: str
    mutability: StateMutability = StateMutability.NON_PAYABLE
    constant: bool = False
    inputs: List[FuncIO] = field(default_factory=list)
    outputs: List[FuncIO] = field(default_factory=list)


@dataclass
class Contract:
    """Root node: a named contract and its ordered ABI entries."""
    name: str
    abi: List[AbiEntry] = field(default_factory=list)

    @property
    def functions(self) -> List[FunctionEntry]:
        """Function entries, in ABI order."""
        return [entry for entry in self.abi if isinstance(entry, FunctionEntry)]
