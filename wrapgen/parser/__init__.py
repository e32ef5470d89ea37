"""
Parser module for the ABI to TypeScript generator.

This module provides the ABI node definitions and the JSON decoder.
"""

from .abi_nodes import (
    # Types
    DataType,
    DataTypeKind,
    StateMutability,
    # Inputs and outputs
    FuncIO,
    EventInput,
    # Entries
    AbiEntry,
    ConstructorEntry,
    EventEntry,
    FunctionEntry,
    Contract,
)
from .decoder import (
    AbiDecoder,
    DecodeError,
    decode_contract,
    parse_contract,
    load_contract,
)

__all__ = [
    # Types
    'DataType',
    'DataTypeKind',
    'StateMutability',
    # Inputs and outputs
    'FuncIO',
    'EventInput',
    # Entries
    'AbiEntry',
    'ConstructorEntry',
    'EventEntry',
    'FunctionEntry',
    'Contract',
    # Decoder
    'AbiDecoder',
    'DecodeError',
    'decode_contract',
    'parse_contract',
    'load_contract',
]
