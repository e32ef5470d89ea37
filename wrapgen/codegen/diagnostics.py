"""
Diagnostic/warning system for the wrapper emitter.

Collects and reports ABI entries that were skipped during generation, so
it is visible which parts of a contract's ABI the generated wrapper does
not expose.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class DiagnosticSeverity(Enum):
    """Severity levels for emitter diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    contract: str = ''
    construct: str = ''  # e.g., 'constructor', 'event', 'constant function'

    def __str__(self) -> str:
        if self.contract:
            return f'[{self.severity.value}] {self.contract}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class EmitterDiagnostics:
    """
    Collects emitter warnings/diagnostics during code generation.

    Usage:
        diag = EmitterDiagnostics()
        diag.info_event_skipped("Transfer", "Token")
        # ... after generation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def infos(self) -> List[Diagnostic]:
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

    @property
    def count(self) -> int:
        return len(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()

    def merge(self, other: 'EmitterDiagnostics') -> None:
        """Append every record collected by another collector, in order."""
        self._diagnostics.extend(other._diagnostics)

    # =========================================================================
    # SPECIFIC DIAGNOSTIC METHODS
    # =========================================================================

    def info_constructor_skipped(self, contract: str = '') -> None:
        """Note that a constructor entry was not rendered."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message='Constructor entry is not rendered into the wrapper.',
            contract=contract,
            construct='constructor',
        ))

    def info_event_skipped(self, event_name: str, contract: str = '') -> None:
        """Note that an event entry was not rendered."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I002',
            message=f'Event "{event_name}" is not rendered into the wrapper.',
            contract=contract,
            construct='event',
        ))

    def warn_constant_skipped(self, function_name: str, prefix: str, contract: str = '') -> None:
        """Warn that the legacy policy skipped a constant function."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Constant function "{function_name}" was skipped '
                    f'(name does not start with "{prefix}").',
            contract=contract,
            construct='constant function',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def _group_warnings(self) -> Dict[str, List[Diagnostic]]:
        by_construct: Dict[str, List[Diagnostic]] = {}
        for w in self.warnings:
            by_construct.setdefault(w.construct or 'other', []).append(w)
        return by_construct

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = self.infos

        if warnings:
            print(f'\nEmitter warnings ({len(warnings)}):', file=file)
            for construct, diags in sorted(self._group_warnings().items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        if infos and self._verbose:
            print(f'\nEmitter info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)
        elif infos:
            print(f'\nEmitter info: {len(infos)} ABI entries not rendered', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all warnings."""
        if not self.warnings:
            return 'No emitter warnings.'

        parts = [
            f'{len(diags)} {construct}'
            for construct, diags in sorted(self._group_warnings().items())
        ]
        return f'Emitter warnings: {", ".join(parts)}'
