"""
Code generation context for the TypeScript wrapper emitter.

This module provides a context class that holds the settings the emitter
reads while generating wrappers, separating configuration from the
generation logic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .diagnostics import EmitterDiagnostics


class EmissionPolicy(Enum):
    """How function entries are turned into methods."""
    # Every function forwards to the capability interface's call()
    UNIFORM = 'uniform'
    # ethers.Contract wrapper: skip constant non-getters, split call()/send()
    LEGACY = 'legacy'


@dataclass
class CodeGenerationContext:
    """
    Holds the settings used during TypeScript wrapper generation.

    The defaults produce wrappers around the shared AbstractContract
    interface, imported from ./AbstractContract and stored in a private
    readonly ``contract`` field.
    """

    # Indentation unit
    indent_str: str = '  '

    # Emission policy
    policy: EmissionPolicy = EmissionPolicy.UNIFORM
    typed_returns: bool = False
    legacy_getter_prefix: str = 'get'

    # Capability interface
    capability_name: str = 'AbstractContract'
    capability_module: str = './AbstractContract'
    capability_field: str = 'contract'
    capability_verb: str = 'call'

    # Prefix of synthesized names for anonymous inputs
    anonymous_prefix: str = '_param'

    # Diagnostics collector
    _diagnostics: Optional[EmitterDiagnostics] = None

    @property
    def diagnostics(self) -> EmitterDiagnostics:
        """Get the diagnostics collector, creating one if needed."""
        if self._diagnostics is None:
            self._diagnostics = EmitterDiagnostics()
        return self._diagnostics

    @property
    def is_legacy(self) -> bool:
        return self.policy == EmissionPolicy.LEGACY

    @property
    def capability_file(self) -> str:
        """File name the capability interface is written to."""
        return f'{self.capability_name}.ts'

    @classmethod
    def legacy(cls, **overrides) -> 'CodeGenerationContext':
        """Create a context for the legacy ethers.Contract wrappers."""
        return cls(policy=EmissionPolicy.LEGACY, **overrides)
