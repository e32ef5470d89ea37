"""
Wrapper generation for ABI to TypeScript conversion.

This module turns a decoded Contract into the source of a TypeScript class
wrapping it, plus the shared capability interface every wrapper forwards
its calls to.
"""

from typing import List, Optional, Sequence

from ..parser.abi_nodes import (
    Contract,
    ConstructorEntry,
    EventEntry,
    FunctionEntry,
    FuncIO,
    StateMutability,
)
from ..type_system import (
    TsType,
    ArrayOf,
    ClassRef,
    Promise,
    STRING,
    UNKNOWN,
    VOID,
    translate_all,
    translate_return,
)
from .builder import (
    Script,
    ClassBody,
    Body,
    Export,
    Visibility,
    Literal,
    Identifier,
)
from .context import CodeGenerationContext
from .diagnostics import EmitterDiagnostics


# Legacy wrappers bind an ethers.Contract directly
ETHERS_MODULE = 'ethers'
ETHERS_CONTRACT = ClassRef('ethers.Contract')


class CodeEmitter:
    """
    Generates TypeScript wrapper classes from Contract nodes.

    This class handles:
    - The shared capability interface (AbstractContract)
    - One default-exported wrapper class per contract
    - One async method per function entry, forwarding to the capability
    - Synthesized names for anonymous inputs
    """

    def __init__(self, ctx: Optional[CodeGenerationContext] = None):
        """
        Initialize the emitter.

        Args:
            ctx: The code generation context; defaults to the uniform policy
        """
        self._ctx = ctx or CodeGenerationContext()

    @property
    def ctx(self) -> CodeGenerationContext:
        return self._ctx

    # =========================================================================
    # MAIN ENTRY POINTS
    # =========================================================================

    def emit_contract_abstraction(self) -> str:
        """Generate the capability interface shared by every wrapper.

        The output does not depend on any contract, so repeated calls
        return identical text.
        """
        return (
            Script.new(self._ctx.indent_str)
            .interface_(self._ctx.capability_name, Export.DEFAULT)
            .method(self._ctx.capability_verb)
            .param('target', STRING)
            .rest_param('args', ArrayOf(UNKNOWN))
            .declare(Promise(UNKNOWN))
            .end()
            .collect()
        )

    def emit(self, contract: Contract) -> str:
        """Generate the wrapper class for a contract.

        Args:
            contract: The decoded contract

        Returns:
            TypeScript source of the wrapper module

        Raises:
            UnsupportedType: if a function input or output has no
                TypeScript representation; nothing is returned and no
                diagnostics are recorded then
        """
        # Recorded into the context only once the whole contract succeeded
        pending = EmitterDiagnostics()

        script = self._emit_imports(Script.new(self._ctx.indent_str)).blank()
        body = self._emit_constructor(script.class_(contract.name, Export.DEFAULT))

        for entry in contract.abi:
            if isinstance(entry, FunctionEntry):
                body = self.emit_function(body, entry, contract.name, pending)
            elif isinstance(entry, ConstructorEntry):
                pending.info_constructor_skipped(contract.name)
            elif isinstance(entry, EventEntry):
                pending.info_event_skipped(entry.name, contract.name)

        source = body.end().collect()
        self._ctx.diagnostics.merge(pending)
        return source

    # =========================================================================
    # CLASS SCAFFOLDING
    # =========================================================================

    def _emit_imports(self, script: Script) -> Script:
        if self._ctx.is_legacy:
            return script.import_default(ETHERS_MODULE, ETHERS_MODULE)
        return script.import_default(self._ctx.capability_name, self._ctx.capability_module)

    def _capability_type(self) -> TsType:
        if self._ctx.is_legacy:
            return ETHERS_CONTRACT
        return ClassRef(self._ctx.capability_name)

    def _emit_constructor(self, body: ClassBody) -> ClassBody:
        """Single private readonly field holding the capability."""
        return (
            body.constructor()
            .field(self._ctx.capability_field, self._capability_type(), True, Visibility.PRIVATE)
            .empty_body()
        )

    # =========================================================================
    # FUNCTIONS
    # =========================================================================

    def emit_function(
        self,
        body: ClassBody,
        func: FunctionEntry,
        contract_name: str = '',
        diagnostics: Optional[EmitterDiagnostics] = None,
    ) -> ClassBody:
        """Append the method for one function entry to a class body.

        Args:
            body: The class body to append to
            func: The function entry
            contract_name: Name reported in diagnostics
            diagnostics: Collector for skipped functions; defaults to the
                context's collector
        """
        if diagnostics is None:
            diagnostics = self._ctx.diagnostics
        if self._skips(func):
            diagnostics.warn_constant_skipped(
                func.name, self._ctx.legacy_getter_prefix, contract_name
            )
            return body

        names = self.parameter_names(func.inputs)
        param_types = translate_all(func.inputs)
        return_type = translate_return(func.outputs)

        signature = body.method(func.name, is_async=True, visibility=Visibility.PUBLIC)
        for name, kind in zip(names, param_types):
            signature = signature.param(name, kind)

        annotate = self._ctx.typed_returns or self._ctx.is_legacy
        method_body = signature.body(Promise(return_type) if annotate else None)

        if self._ctx.is_legacy:
            method_body = self._emit_legacy_body(method_body, func, names)
        else:
            method_body = self._emit_forward_body(method_body, func, names, return_type)
        return method_body.end()

    def _skips(self, func: FunctionEntry) -> bool:
        """Legacy policy only: constant functions other than getters are skipped."""
        return (
            self._ctx.is_legacy
            and func.constant
            and not func.name.startswith(self._ctx.legacy_getter_prefix)
        )

    def _emit_forward_body(
        self,
        body: Body,
        func: FunctionEntry,
        names: Sequence[str],
        return_type: TsType,
    ) -> Body:
        """``return await this.contract.call("name", a, b);``"""
        receiver = ('this', self._ctx.capability_field)
        arguments = [Literal(func.name)] + [Identifier(name) for name in names]

        if not self._ctx.typed_returns:
            return body.await_call(receiver, self._ctx.capability_verb, arguments)
        if return_type == VOID:
            return body.await_call(
                receiver, self._ctx.capability_verb, arguments, do_return=False
            )
        return body.await_call(
            receiver, self._ctx.capability_verb, arguments, as_type=return_type
        )

    def _emit_legacy_body(
        self,
        body: Body,
        func: FunctionEntry,
        names: Sequence[str],
    ) -> Body:
        """Look the method up on the ethers contract; view functions call(), others send()."""
        body = (
            body.statement()
            .const('method')
            .path('this', self._ctx.capability_field, 'methods')
            .index(func.name)
            .end()
        )

        call = body.statement().const('callAction').do_await().field('method').call()
        for name in names:
            call = call.arg().field(name).end()
        body = call.close().end()

        verb = 'call' if func.mutability == StateMutability.VIEW else 'send'
        return body.await_call(('callAction',), verb)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def parameter_names(self, inputs: Sequence[FuncIO]) -> List[str]:
        """Parameter names in input order.

        Anonymous inputs are named ``_param<N>``, N counting anonymous
        inputs only. A synthesized name never repeats an explicit input
        name; N skips ahead past any name already taken.
        """
        taken = {item.name for item in inputs if item.name}
        names = []
        anonymous = 0
        for item in inputs:
            if item.name:
                names.append(item.name)
                continue
            while f'{self._ctx.anonymous_prefix}{anonymous}' in taken:
                anonymous += 1
            names.append(f'{self._ctx.anonymous_prefix}{anonymous}')
            anonymous += 1
        return names


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def emit(contract: Contract, ctx: Optional[CodeGenerationContext] = None) -> str:
    """Generate the wrapper class for a contract."""
    return CodeEmitter(ctx).emit(contract)


def emit_contract_abstraction(ctx: Optional[CodeGenerationContext] = None) -> str:
    """Generate the shared capability interface."""
    return CodeEmitter(ctx).emit_contract_abstraction()
