"""
Staged TypeScript source builder.

The builder models the TypeScript grammar as a sequence of positions a
writer can occupy: top-level script, import statement, class or interface
body, method or constructor signature, statement body, expression and call
arguments.
Each position is its own immutable value exposing only the operations that
are legal there; every operation returns the value for the next position,
so a generation pipeline is a plain chain of calls:

    Script.new()
        .import_default('AbstractContract', './AbstractContract')
        .class_('Token', Export.DEFAULT)
        .constructor()
        .field('contract', ClassRef('AbstractContract'), True, Visibility.PRIVATE)
        .empty_body()
        .end()
        .collect()

Expressions and calls are generic in the position they return to, so a
nested call closes back into its argument list and a statement closes back
into its body.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Generic, Optional, Sequence, TypeVar, Union

from ..type_system.ts_types import TsType


P = TypeVar('P')


class BuilderError(RuntimeError):
    """Raised when scopes are closed more often than they were opened."""
    pass


# =============================================================================
# MODIFIERS
# =============================================================================

class Visibility(Enum):
    """Member visibility modifiers."""
    PUBLIC = 'public'
    PROTECTED = 'protected'
    PRIVATE = 'private'
    NOT_SPECIFIED = ''


class Export(Enum):
    """Export modifier of a top-level declaration."""
    NONE = ''
    NAMED = 'export '
    DEFAULT = 'export default '


class ClassType(Enum):
    """Kind of a class declaration."""
    CLASS = 'class'
    ABSTRACT = 'abstract class'


def _modifiers(*words: str) -> str:
    """Join non-empty modifier words, with a trailing space if any."""
    present = [word for word in words if word]
    return ' '.join(present) + ' ' if present else ''


def _quote(value: str) -> str:
    escaped = value.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\n')
    return f'"{escaped}"'


# =============================================================================
# WRITER
# =============================================================================

@dataclass(frozen=True)
class _Writer:
    """Accumulated output plus the current indentation depth."""
    output: str = ''
    level: int = 0
    indent: str = '  '

    def add(self, text: object) -> '_Writer':
        return replace(self, output=self.output + str(text))

    def line(self) -> '_Writer':
        """Start a new line at the current depth."""
        if not self.output:
            return replace(self, output=self.indent * self.level)
        return replace(self, output=f'{self.output}\n{self.indent * self.level}')

    def push(self) -> '_Writer':
        return replace(self, level=self.level + 1)

    def pop(self) -> '_Writer':
        if self.level == 0:
            raise BuilderError('Cannot close a scope at depth 0')
        return replace(self, level=self.level - 1)


# =============================================================================
# TOP-LEVEL SCRIPT
# =============================================================================

@dataclass(frozen=True)
class Script:
    """Top-level position: imports, declarations and plain statements."""
    writer: _Writer = field(default_factory=_Writer)

    @classmethod
    def new(cls, indent_str: str = '  ') -> 'Script':
        return cls(_Writer(indent=indent_str))

    @property
    def depth(self) -> int:
        return self.writer.level

    def import_(self) -> 'ImportClause':
        return ImportClause(self.writer.line().add('import '))

    def import_default(self, name: str, path: str) -> 'Script':
        """Emit ``import name from "path";``."""
        return self.import_().default(name).source(path)

    def import_namespace(self, alias: str, path: str) -> 'Script':
        """Emit ``import * as alias from "path";``."""
        return self.import_().namespace(alias).source(path)

    def class_(
        self,
        name: str,
        export: Export = Export.NONE,
        kind: ClassType = ClassType.CLASS,
    ) -> 'ClassBody':
        """Open a class or abstract class declaration."""
        writer = (
            self.writer.line()
            .add(export.value)
            .add(f'{kind.value} {name} {{')
            .push()
        )
        return ClassBody(writer)

    def interface_(self, name: str, export: Export = Export.NONE) -> 'InterfaceBody':
        """Open an interface declaration; its members are declarations only."""
        writer = (
            self.writer.line()
            .add(export.value)
            .add(f'interface {name} {{')
            .push()
        )
        return InterfaceBody(writer)

    def statement(self) -> 'Expression[Script]':
        return Expression(self.writer.line(), _end_script_statement)

    def blank(self) -> 'Script':
        """Leave an empty line before the next line."""
        if not self.writer.output:
            return self
        return Script(self.writer.add('\n'))

    def collect(self) -> str:
        """Return the finished source text, terminated by a newline."""
        if self.writer.level != 0:
            raise BuilderError(f'{self.writer.level} scope(s) left open')
        return self.writer.add('\n').output


def _end_script_statement(writer: _Writer) -> Script:
    return Script(writer.add(';'))


# =============================================================================
# IMPORTS
# =============================================================================

@dataclass(frozen=True)
class ImportClause:
    """Position after ``import``: what to bind."""
    writer: _Writer

    def default(self, name: str) -> 'ImportSource':
        return ImportSource(self.writer.add(f'{name} from "'))

    def namespace(self, alias: str) -> 'ImportSource':
        return ImportSource(self.writer.add(f'* as {alias} from "'))


@dataclass(frozen=True)
class ImportSource:
    """Position inside the module path of an import."""
    writer: _Writer

    def source(self, path: str) -> Script:
        return Script(self.writer.add(path).add('";'))


# =============================================================================
# CLASS BODY
# =============================================================================

@dataclass(frozen=True)
class ClassBody:
    """Position inside a class declaration."""
    writer: _Writer

    @property
    def depth(self) -> int:
        return self.writer.level

    def constructor(self) -> 'Signature':
        return Signature(self.writer.line().add('constructor('))

    def method(
        self,
        name: str,
        is_async: bool = False,
        visibility: Visibility = Visibility.NOT_SPECIFIED,
    ) -> 'Signature':
        prefix = _modifiers(visibility.value, 'async' if is_async else '')
        return Signature(self.writer.line().add(f'{prefix}{name}('))

    def end(self) -> Script:
        """Close the declaration; the brace lands at the outer depth."""
        return Script(self.writer.pop().line().add('}'))


@dataclass(frozen=True)
class InterfaceBody:
    """Position inside an interface declaration. Members have no bodies."""
    writer: _Writer

    @property
    def depth(self) -> int:
        return self.writer.level

    def method(self, name: str) -> 'MemberDeclaration':
        return MemberDeclaration(self.writer.line().add(f'{name}('))

    def end(self) -> Script:
        return Script(self.writer.pop().line().add('}'))


# =============================================================================
# SIGNATURES
# =============================================================================

S = TypeVar('S', bound='_ParameterList')


@dataclass(frozen=True)
class _ParameterList:
    """Shared parameter handling; ``params`` counts parameters written so far."""
    writer: _Writer
    params: int = 0

    def _next(self: S, text: str) -> S:
        separator = ', ' if self.params else ''
        return replace(self, writer=self.writer.add(separator).add(text), params=self.params + 1)

    def param(self: S, name: str, kind: TsType) -> S:
        """Append ``name: Type``."""
        return self._next(f'{name}: {kind.render()}')

    def rest_param(self: S, name: str, kind: TsType) -> S:
        """Append ``...name: Type``."""
        return self._next(f'...{name}: {kind.render()}')


@dataclass(frozen=True)
class MemberDeclaration(_ParameterList):
    """Position inside the parameter list of an interface member."""

    def declare(self, return_type: TsType) -> 'InterfaceBody':
        return InterfaceBody(self.writer.add(f'): {return_type.render()};'))


@dataclass(frozen=True)
class Signature(_ParameterList):
    """Position inside the parameter list of a constructor or method."""

    def field(
        self,
        name: str,
        kind: TsType,
        readonly: bool = False,
        visibility: Visibility = Visibility.NOT_SPECIFIED,
    ) -> 'Signature':
        """Append a constructor-promoted field, e.g. ``private readonly x: T``."""
        prefix = _modifiers(visibility.value, 'readonly' if readonly else '')
        return self._next(f'{prefix}{name}: {kind.render()}')

    def empty_body(self) -> ClassBody:
        """Close the signature with ``{}`` (constructors with promoted fields)."""
        return ClassBody(self.writer.add(') {}'))

    def declare(self, return_type: TsType) -> ClassBody:
        """Close the signature as a declaration without a body."""
        return ClassBody(self.writer.add(f'): {return_type.render()};'))

    def body(self, return_type: Optional[TsType] = None) -> 'Body':
        annotation = f': {return_type.render()}' if return_type is not None else ''
        return Body(self.writer.add(f'){annotation} {{').push())


# =============================================================================
# STATEMENT BODY
# =============================================================================

@dataclass(frozen=True)
class Body:
    """Position inside a method body, between statements."""
    writer: _Writer

    @property
    def depth(self) -> int:
        return self.writer.level

    def statement(self) -> 'Expression[Body]':
        return Expression(self.writer.line(), _end_body_statement)

    def await_call(
        self,
        receiver: Sequence[str],
        verb: str,
        arguments: Sequence['Argument'] = (),
        do_return: bool = True,
        as_type: Optional[TsType] = None,
    ) -> 'Body':
        """Emit ``[return ]await <receiver>.<verb>(<arguments>)[ as T];``.

        Args:
            receiver: Dotted path of the receiver, e.g. ('this', 'contract')
            verb: Method or property called on the receiver
            arguments: Call arguments, in order
            do_return: Whether to return the awaited result
            as_type: Optional type assertion on the awaited result

        Returns:
            The body, positioned after the statement
        """
        expr = self.statement()
        if do_return:
            expr = expr.do_return()
        expr = expr.do_await().path(*receiver, verb)
        call = expr.call()
        for argument in arguments:
            call = argument.write(call.arg()).end()
        expr = call.close()
        if as_type is not None:
            expr = expr.as_type(as_type)
        return expr.end()

    def end(self) -> ClassBody:
        """Close the method; the brace lands at the outer depth."""
        return ClassBody(self.writer.pop().line().add('}'))


def _end_body_statement(writer: _Writer) -> Body:
    return Body(writer.add(';'))


# =============================================================================
# EXPRESSIONS
# =============================================================================

@dataclass(frozen=True)
class Expression(Generic[P]):
    """Position inside an expression; ``end()`` returns to the owner P."""
    writer: _Writer
    resume: Callable[[_Writer], P]

    def _add(self, text: str) -> 'Expression[P]':
        return Expression(self.writer.add(text), self.resume)

    def this(self) -> 'Expression[P]':
        return self._add('this')

    def dot(self) -> 'Expression[P]':
        return self._add('.')

    def field(self, name: str) -> 'Expression[P]':
        """Reference a field or identifier by name."""
        return self._add(name)

    def path(self, *names: str) -> 'Expression[P]':
        """Dotted member path, e.g. path('this', 'contract') -> this.contract."""
        return self._add('.'.join(names))

    def index(self, key: str) -> 'Expression[P]':
        """String-keyed element access, e.g. ``["key"]``."""
        return self._add(f'[{_quote(key)}]')

    def string(self, value: str) -> 'Expression[P]':
        return self._add(_quote(value))

    def number(self, value: Union[int, float]) -> 'Expression[P]':
        return self._add(str(value))

    def boolean(self, value: bool) -> 'Expression[P]':
        return self._add('true' if value else 'false')

    def do_return(self) -> 'Expression[P]':
        return self._add('return ')

    def do_await(self) -> 'Expression[P]':
        return self._add('await ')

    def const(self, name: str) -> 'Expression[P]':
        return self._add(f'const {name} = ')

    def as_type(self, kind: TsType) -> 'Expression[P]':
        return self._add(f' as {kind.render()}')

    def call(self) -> 'CallExpression[P]':
        return CallExpression(self.writer.add('('), self.resume)

    def end(self) -> P:
        return self.resume(self.writer)


@dataclass(frozen=True)
class CallExpression(Generic[P]):
    """Position inside the argument list of a call.

    ``args`` counts the arguments appended so far and decides whether the
    next one needs a separator.
    """
    writer: _Writer
    resume: Callable[[_Writer], P]
    args: int = 0

    def arg(self) -> 'Expression[CallExpression[P]]':
        separator = ', ' if self.args else ''
        return Expression(
            self.writer.add(separator),
            _back_to_call(self.resume, self.args + 1),
        )

    def close(self) -> Expression[P]:
        return Expression(self.writer.add(')'), self.resume)


def _back_to_call(
    resume: Callable[[_Writer], P],
    args: int,
) -> Callable[[_Writer], CallExpression[P]]:
    def _resume(writer: _Writer) -> CallExpression[P]:
        return CallExpression(writer, resume, args)
    return _resume


# =============================================================================
# ARGUMENTS
# =============================================================================

@dataclass(frozen=True)
class Literal:
    """A string, number or boolean literal argument."""
    value: Union[str, int, float, bool]

    def write(self, expr: Expression[P]) -> Expression[P]:
        if isinstance(self.value, str):
            return expr.string(self.value)
        # bool is an int subclass; check it first
        if isinstance(self.value, bool):
            return expr.boolean(self.value)
        return expr.number(self.value)


@dataclass(frozen=True)
class Identifier:
    """A reference to a parameter, field or other identifier."""
    name: str

    def write(self, expr: Expression[P]) -> Expression[P]:
        return expr.field(self.name)


Argument = Union[Literal, Identifier]
