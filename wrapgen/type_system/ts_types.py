"""
TypeScript type nodes.

This module contains the small type language the generator writes into
signatures: primitives, arrays, tuples, unions, references to named
classes/interfaces, inline interface literals, records and the Partial /
Promise wrappers. Every node renders itself to TypeScript source with
``render()``.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TsType:
    """Base class for all TypeScript type nodes."""

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Primitive(TsType):
    """A keyword type (number, string, boolean, any, unknown, ...)."""
    name: str

    def render(self) -> str:
        return self.name


NUMBER = Primitive('number')
STRING = Primitive('string')
BOOLEAN = Primitive('boolean')
OBJECT = Primitive('object')
NULL = Primitive('null')
VOID = Primitive('void')
ANY = Primitive('any')
UNKNOWN = Primitive('unknown')
NEVER = Primitive('never')


@dataclass(frozen=True)
class ArrayOf(TsType):
    """Array of an element type, written T[]."""
    element: TsType

    def render(self) -> str:
        inner = self.element.render()
        # (A | B)[] rather than A | B[]
        if isinstance(self.element, Union):
            return f'({inner})[]'
        return f'{inner}[]'


@dataclass(frozen=True)
class TupleOf(TsType):
    """Fixed-length tuple, written [A, B]."""
    items: Tuple[TsType, ...]

    def render(self) -> str:
        return f'[{", ".join(item.render() for item in self.items)}]'


@dataclass(frozen=True)
class Union(TsType):
    """Union of member types, written A | B."""
    members: Tuple[TsType, ...]

    def render(self) -> str:
        return ' | '.join(member.render() for member in self.members)


@dataclass(frozen=True)
class ClassRef(TsType):
    """Reference to a named class or interface (e.g. AbstractContract)."""
    name: str

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class InterfaceLiteral(TsType):
    """Inline object type, written { "field": T, ... }.

    Fields keep their declaration order.
    """
    fields: Tuple[Tuple[str, TsType], ...]

    def render(self) -> str:
        if not self.fields:
            return '{}'
        body = ', '.join(f'"{name}": {kind.render()}' for name, kind in self.fields)
        return f'{{ {body} }}'


@dataclass(frozen=True)
class Record(TsType):
    """Keyed map type, written Record<K, V>."""
    key: TsType
    value: TsType

    def render(self) -> str:
        return f'Record<{self.key.render()}, {self.value.render()}>'


@dataclass(frozen=True)
class Partial(TsType):
    inner: TsType

    def render(self) -> str:
        return f'Partial<{self.inner.render()}>'


@dataclass(frozen=True)
class Promise(TsType):
    awaited: TsType

    def render(self) -> str:
        return f'Promise<{self.awaited.render()}>'


def union(*members: TsType) -> Union:
    return Union(tuple(members))


def tuple_of(*items: TsType) -> TupleOf:
    return TupleOf(tuple(items))


def interface(**fields: TsType) -> InterfaceLiteral:
    return InterfaceLiteral(tuple(fields.items()))
