"""
Diagnostic/warning system for the binding generator.

Collects and reports notes about ABI members that were skipped, renamed or
degraded during generation. Helps developers understand why a generated
binding differs from the ABI they handed in.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List


class DiagnosticSeverity(Enum):
    """Severity levels for generator diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    member: str = ''
    construct: str = ''  # e.g., 'function', 'event', 'name'

    def __str__(self) -> str:
        if self.member:
            return f'[{self.severity.value}] {self.member}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class GenerationDiagnostics:
    """
    Collects generator diagnostics during one generation pass.

    Usage:
        diag = GenerationDiagnostics()
        diag.info_function_skipped("approve")
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

    # =========================================================================
    # SPECIFIC DIAGNOSTIC METHODS
    # =========================================================================

    def info_function_skipped(self, function_name: str) -> None:
        """Note that a function without outputs got no contract wrapper method."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message='Function has no outputs; no contract wrapper method generated.',
            member=function_name,
            construct='function',
        ))

    def info_indexed_param_hashed(
        self,
        event_name: str,
        param_name: str,
        abi_type: str,
    ) -> None:
        """Note that an indexed parameter is only available as its topic hash."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I002',
            message=f'Indexed parameter "{param_name}" of type {abi_type} '
                    f'is decoded as its bytes32 topic hash.',
            member=event_name,
            construct='event',
        ))

    def info_name_disambiguated(
        self,
        scope: str,
        original: str,
        alias: str,
    ) -> None:
        """Note that a duplicate name was renamed."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I003',
            message=f'Duplicate name "{original}" renamed to "{alias}".',
            member=scope,
            construct='name',
        ))

    def warn_function_excluded(self, function_name: str, mutability: str) -> None:
        """Warn that a function with outputs is excluded by the mutability policy."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Function is {mutability}; not exposed on the contract wrapper '
                    f'despite having outputs.',
            member=function_name,
            construct='function',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if warnings:
            print(f'\nGenerator warnings ({len(warnings)}):', file=file)
            by_construct: dict = {}
            for w in warnings:
                by_construct.setdefault(w.construct or 'other', []).append(w)

            for construct, diags in sorted(by_construct.items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        if infos and self._verbose:
            print(f'\nGenerator info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all warnings."""
        warnings = self.warnings
        if not warnings:
            return 'No generator warnings.'

        by_construct: dict = {}
        for w in warnings:
            key = w.construct or 'other'
            by_construct[key] = by_construct.get(key, 0) + 1

        parts = [f'{count} {construct}' for construct, count in sorted(by_construct.items())]
        return f'Generator warnings: {", ".join(parts)}'
