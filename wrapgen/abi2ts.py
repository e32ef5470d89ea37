#!/usr/bin/env python3
"""
ABI to TypeScript wrapper generator.

Reads contract ABI documents (compiler artifacts with a contract name and
an "abi" list) and writes one typed TypeScript wrapper class per contract,
plus the AbstractContract interface every wrapper forwards its calls to.

Usage:
    abi2ts build/contracts/Token.json build/contracts/Vault.json

Each input produces <ContractName>.ts in the current directory, followed by
AbstractContract.ts. The batch stops at the first input that fails.
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .parser import Contract, DecodeError, load_contract
from .type_system import UnsupportedType
from .codegen import CodeEmitter, CodeGenerationContext


class AbiToTypeScriptGenerator:
    """Main generator class that orchestrates decoding, emission and output."""

    def __init__(
        self,
        output_dir: str = '.',
        ctx: Optional[CodeGenerationContext] = None,
    ):
        self.output_dir = Path(output_dir)
        self.ctx = ctx or CodeGenerationContext()
        self.emitter = CodeEmitter(self.ctx)

    def generate_contract(self, contract: Contract) -> Tuple[str, str]:
        """Generate the wrapper for a decoded contract.

        Returns:
            (output path, TypeScript source)
        """
        ts_code = self.emitter.emit(contract)
        return str(self.output_dir / f'{contract.name}.ts'), ts_code

    def generate_file(self, filepath: str) -> Tuple[str, str]:
        """Decode an ABI file and generate its wrapper."""
        return self.generate_contract(load_contract(filepath))

    def generate_abstraction(self) -> Tuple[str, str]:
        """Generate the shared capability interface."""
        path = self.output_dir / self.ctx.capability_file
        return str(path), self.emitter.emit_contract_abstraction()

    def write_output(self, results: Dict[str, str]) -> None:
        """Write generated TypeScript files to disk."""
        for filepath, content in results.items():
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w') as f:
                f.write(content)


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        prog='abi2ts',
        description='Generate typed TypeScript wrappers from contract ABI files',
    )
    parser.add_argument('inputs', nargs='+', metavar='FILE', help='ABI JSON file')

    args = parser.parse_args(argv)

    generator = AbiToTypeScriptGenerator()
    for input_path in args.inputs:
        print(f'Compiling {input_path}...', end='')
        try:
            ts_path, ts_code = generator.generate_file(input_path)
        except (OSError, DecodeError, UnsupportedType) as e:
            print(' FAILED')
            print(f'Error: {input_path}: {e}', file=sys.stderr)
            return 1
        generator.write_output({ts_path: ts_code})
        print(f' OK! see {ts_path}')

    abstraction_path, abstraction = generator.generate_abstraction()
    generator.write_output({abstraction_path: abstraction})
    generator.ctx.diagnostics.print_summary()
    print('All done!')
    return 0


if __name__ == '__main__':
    sys.exit(main())
