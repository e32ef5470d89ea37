"""
Type mappings and conversion utilities for ABI to TypeScript.

This module contains the mapping from ABI data types to their TypeScript
equivalents. The mapping is partial: named internal types (contracts,
enums) and unrecognized raw types have no TypeScript representation and
translating them raises UnsupportedType.
"""

from typing import List, Sequence

from ..parser.abi_nodes import DataType, DataTypeKind, FuncIO
from .ts_types import (
    TsType,
    ArrayOf,
    NUMBER,
    STRING,
    BOOLEAN,
    VOID,
    tuple_of,
)


class UnsupportedType(TypeError):
    """Raised when an ABI data type has no direct TypeScript representation."""

    def __init__(self, data_type: DataType):
        self.data_type = data_type
        super().__init__(f'Unsupported ABI type: {data_type}')


# =============================================================================
# TYPE MAPPING CONSTANTS
# =============================================================================

ABI_TO_TS_MAP = {
    # Integer types -> number
    DataTypeKind.UINT256: NUMBER,
    DataTypeKind.UINT8: NUMBER,
    # Integer arrays -> number[]
    DataTypeKind.UINT8_ARRAY: ArrayOf(NUMBER),
    DataTypeKind.UINT256_ARRAY: ArrayOf(NUMBER),
    # Strings and addresses
    DataTypeKind.STRING: STRING,
    DataTypeKind.ADDRESS: STRING,
    # Boolean
    DataTypeKind.BOOL: BOOLEAN,
}


# =============================================================================
# TYPE CONVERSION FUNCTIONS
# =============================================================================

def translate(data_type: DataType) -> TsType:
    """
    Convert an ABI DataType to its TypeScript equivalent.

    Args:
        data_type: The decoded ABI type

    Returns:
        The TypeScript type node

    Raises:
        UnsupportedType: for contract, enum and unrecognized types
    """
    ts_type = ABI_TO_TS_MAP.get(data_type.kind)
    if ts_type is None:
        raise UnsupportedType(data_type)
    return ts_type


def translate_all(items: Sequence[FuncIO]) -> List[TsType]:
    """Translate the io_type of every input/output, in order."""
    return [translate(item.io_type) for item in items]


def translate_return(outputs: Sequence[FuncIO]) -> TsType:
    """Get the awaited return type of a function from its outputs.

    No outputs -> void, one output -> its type, several -> a tuple.
    """
    types = translate_all(outputs)
    if not types:
        return VOID
    if len(types) == 1:
        return types[0]
    return tuple_of(*types)
