"""
Code generation module for the ABI to TypeScript generator.

This module provides the staged source builder and the wrapper emitter.
"""

from .builder import (
    Script,
    ImportClause,
    ImportSource,
    ClassBody,
    InterfaceBody,
    Signature,
    MemberDeclaration,
    Body,
    Expression,
    CallExpression,
    Literal,
    Identifier,
    Visibility,
    Export,
    ClassType,
    BuilderError,
)
from .context import CodeGenerationContext, EmissionPolicy
from .diagnostics import EmitterDiagnostics, Diagnostic, DiagnosticSeverity
from .emitter import CodeEmitter, emit, emit_contract_abstraction

__all__ = [
    # Builder
    'Script',
    'ImportClause',
    'ImportSource',
    'ClassBody',
    'InterfaceBody',
    'Signature',
    'MemberDeclaration',
    'Body',
    'Expression',
    'CallExpression',
    'Literal',
    'Identifier',
    'Visibility',
    'Export',
    'ClassType',
    'BuilderError',
    # Emitter
    'CodeGenerationContext',
    'EmissionPolicy',
    'CodeEmitter',
    'emit',
    'emit_contract_abstraction',
    # Diagnostics
    'EmitterDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
