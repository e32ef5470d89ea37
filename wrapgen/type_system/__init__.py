"""
Types module for the ABI to TypeScript generator.

This module provides the TypeScript type nodes and the ABI type mappings.
"""

from .ts_types import (
    TsType,
    Primitive,
    ArrayOf,
    TupleOf,
    Union,
    ClassRef,
    InterfaceLiteral,
    Record,
    Partial,
    Promise,
    NUMBER,
    STRING,
    BOOLEAN,
    OBJECT,
    NULL,
    VOID,
    ANY,
    UNKNOWN,
    NEVER,
    union,
    tuple_of,
    interface,
)
from .mappings import (
    UnsupportedType,
    translate,
    translate_all,
    translate_return,
    ABI_TO_TS_MAP,
)

__all__ = [
    # TypeScript type nodes
    'TsType',
    'Primitive',
    'ArrayOf',
    'TupleOf',
    'Union',
    'ClassRef',
    'InterfaceLiteral',
    'Record',
    'Partial',
    'Promise',
    'NUMBER',
    'STRING',
    'BOOLEAN',
    'OBJECT',
    'NULL',
    'VOID',
    'ANY',
    'UNKNOWN',
    'NEVER',
    'union',
    'tuple_of',
    'interface',
    # Mappings
    'UnsupportedType',
    'translate',
    'translate_all',
    'translate_return',
    'ABI_TO_TS_MAP',
]
