"""
ABI to TypeScript wrapper generator

This package turns a contract's ABI into a typed TypeScript wrapper class
whose async methods forward to a shared AbstractContract capability.

Module Structure:
- parser/: ABI nodes and the JSON decoder (Contract, FunctionEntry, DataType, ...)
- type_system/: TypeScript type nodes and the ABI type mappings (translate)
- codegen/: Staged source builder (Script, ClassBody, ...) and CodeEmitter
- abi2ts.py: Driver class and command-line interface

Usage:
    from wrapgen.parser import parse_contract
    from wrapgen.codegen import CodeEmitter

    contract = parse_contract(source)
    emitter = CodeEmitter()
    wrapper = emitter.emit(contract)
    abstraction = emitter.emit_contract_abstraction()
"""

from .abi2ts import AbiToTypeScriptGenerator
from .parser import Contract, DataType, DecodeError, parse_contract, load_contract
from .type_system import UnsupportedType, translate
from .codegen import CodeEmitter, CodeGenerationContext, EmissionPolicy, Script

__all__ = [
    'AbiToTypeScriptGenerator',
    'Contract',
    'DataType',
    'DecodeError',
    'parse_contract',
    'load_contract',
    'UnsupportedType',
    'translate',
    'CodeEmitter',
    'CodeGenerationContext',
    'EmissionPolicy',
    'Script',
]
