"""
ABI JSON decoder.

The AbiDecoder converts a parsed JSON document (a compiler artifact holding
a contract name and its ABI) into the Contract node tree defined in
abi_nodes.
"""

import json
from typing import Any, Dict, List, Optional

from .abi_nodes import (
    Contract,
    AbiEntry,
    ConstructorEntry,
    EventEntry,
    FunctionEntry,
    FuncIO,
    EventInput,
    DataType,
    StateMutability,
)


class DecodeError(ValueError):
    """Raised when an ABI document is malformed or misses a required field."""

    def __init__(self, message: str, path: str = ''):
        self.path = path
        super().__init__(f'{path}: {message}' if path else message)


# Keys accepted for the contract name, in lookup order
CONTRACT_NAME_KEYS = ('contractName', 'name')


class AbiDecoder:
    """
    Decoder for ABI documents.

    Every node is checked for the fields it requires; the first problem
    raises a DecodeError naming the offending location (e.g.
    ``abi[2].inputs[0]``).
    """

    def __init__(self, document: Any):
        self.document = document

    # =========================================================================
    # FIELD ACCESS
    # =========================================================================

    def expect(self, obj: Dict[str, Any], key: str, kind: type, path: str) -> Any:
        """Return obj[key] if present and of the given kind, otherwise raise."""
        if key not in obj:
            raise DecodeError(f'missing required field "{key}"', path)
        value = obj[key]
        # bool is an int subclass; keep the two apart
        if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
            raise DecodeError(
                f'field "{key}" must be {kind.__name__}, got {type(value).__name__}', path
            )
        return value

    def optional(self, obj: Dict[str, Any], key: str, kind: type, default: Any, path: str) -> Any:
        """Return obj[key] if present (checked like expect), otherwise default."""
        if key not in obj:
            return default
        return self.expect(obj, key, kind, path)

    def expect_object(self, value: Any, path: str) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise DecodeError(f'expected an object, got {type(value).__name__}', path)
        return value

    # =========================================================================
    # TOP-LEVEL DECODING
    # =========================================================================

    def decode(self) -> Contract:
        """Decode the whole document into a Contract."""
        root = self.expect_object(self.document, '$')

        name: Optional[str] = None
        for key in CONTRACT_NAME_KEYS:
            if key in root:
                name = self.expect(root, key, str, '$')
                break
        if name is None:
            raise DecodeError('missing required field "contractName"', '$')

        entries = self.expect(root, 'abi', list, '$')
        abi = [self.decode_entry(entry, f'abi[{i}]') for i, entry in enumerate(entries)]
        return Contract(name=name, abi=abi)

    def decode_entry(self, value: Any, path: str) -> AbiEntry:
        """Decode one ABI entry, dispatching on its "type" field."""
        entry = self.expect_object(value, path)
        entry_type = self.expect(entry, 'type', str, path)

        if entry_type == 'function':
            return self.decode_function(entry, path)
        if entry_type == 'constructor':
            return self.decode_constructor(entry, path)
        if entry_type == 'event':
            return self.decode_event(entry, path)
        raise DecodeError(f'unknown entry type "{entry_type}"', path)

    # =========================================================================
    # ENTRIES
    # =========================================================================

    def decode_function(self, entry: Dict[str, Any], path: str) -> FunctionEntry:
        return FunctionEntry(
            name=self.expect(entry, 'name', str, path),
            mutability=self.decode_mutability(entry, path),
            constant=self.optional(entry, 'constant', bool, False, path),
            inputs=self.decode_io_list(entry, 'inputs', path),
            outputs=self.decode_io_list(entry, 'outputs', path),
        )

    def decode_constructor(self, entry: Dict[str, Any], path: str) -> ConstructorEntry:
        return ConstructorEntry(
            inputs=self.decode_io_list(entry, 'inputs', path),
            mutability=self.decode_mutability(entry, path),
        )

    def decode_event(self, entry: Dict[str, Any], path: str) -> EventEntry:
        inputs: List[EventInput] = []
        for i, value in enumerate(self.expect(entry, 'inputs', list, path)):
            item_path = f'{path}.inputs[{i}]'
            item = self.expect_object(value, item_path)
            io = self.decode_io(item, item_path)
            inputs.append(EventInput(
                name=io.name,
                io_type=io.io_type,
                internal_type=io.internal_type,
                indexed=self.expect(item, 'indexed', bool, item_path),
            ))
        return EventEntry(
            name=self.expect(entry, 'name', str, path),
            anonymous=self.expect(entry, 'anonymous', bool, path),
            inputs=inputs,
        )

    def decode_mutability(self, entry: Dict[str, Any], path: str) -> StateMutability:
        raw = self.expect(entry, 'stateMutability', str, path)
        try:
            return StateMutability(raw)
        except ValueError:
            raise DecodeError(f'unknown state mutability "{raw}"', path) from None

    # =========================================================================
    # INPUTS AND OUTPUTS
    # =========================================================================

    def decode_io_list(self, entry: Dict[str, Any], key: str, path: str) -> List[FuncIO]:
        items = self.expect(entry, key, list, path)
        result = []
        for i, value in enumerate(items):
            item_path = f'{path}.{key}[{i}]'
            result.append(self.decode_io(self.expect_object(value, item_path), item_path))
        return result

    def decode_io(self, item: Dict[str, Any], path: str) -> FuncIO:
        return FuncIO(
            name=self.expect(item, 'name', str, path),
            io_type=DataType.from_raw(self.expect(item, 'type', str, path)),
            internal_type=DataType.from_raw(self.expect(item, 'internalType', str, path)),
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def decode_contract(document: Any) -> Contract:
    """Decode an already-parsed JSON document into a Contract."""
    return AbiDecoder(document).decode()


def parse_contract(source: str) -> Contract:
    """Parse a JSON string into a Contract."""
    try:
        document = json.loads(source)
    except json.JSONDecodeError as e:
        raise DecodeError(f'invalid JSON: {e}') from e
    return decode_contract(document)


def load_contract(filepath: str) -> Contract:
    """Read and decode an ABI JSON file."""
    with open(filepath, 'r') as f:
        source = f.read()
    return parse_contract(source)
