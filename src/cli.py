# src/cli.py
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from semantic import AnalysisConfig, AnalysisResult, InternalFault, analyze

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_SYNTAX = 2
EXIT_SEMANTIC = 3
EXIT_INTERNAL = 4


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="easycalc", description="Semantic analysis of EasyCalc programs")
    p.add_argument("file", type=Path, help="Path to the EasyCalc source file")
    p.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    p.add_argument("--write-consumes", action="store_true",
                   help="Let 'write' statements consume their expression type")
    p.add_argument("--strict-stack", action="store_true",
                   help="Abort on the first type-stack contract violation")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def print_result(result: AnalysisResult, out: TextIO, *, as_json: bool = False) -> None:
    """
    Imprime el resultado del análisis.

    Por defecto: la tabla de símbolos (una línea "id -> TIPO" por declaración)
    y luego los diagnósticos, uno por línea. Con as_json imprime to_dict().
    """
    if as_json:
        json.dump(result.to_dict(), out, indent=2)
        out.write("\n")
        return
    out.write("=== Symbol Table ===\n")
    out.write(result.symbol_report)
    out.write("\n=== Diagnostics ===\n")
    if result.ok:
        out.write("no errors found\n")
    else:
        out.write(result.diagnostics_report)


def _parse(path: Path):
    # El parser generado solo se necesita aquí
    from parsing.antlr.parser_builder import build_from_file
    return build_from_file(path)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        parsed = _parse(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"easycalc: cannot read {args.file}: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if not parsed.ok():
        for err in parsed.errors:
            print(err, file=sys.stderr)
        return EXIT_SYNTAX

    config = AnalysisConfig(write_consumes=args.write_consumes, strict_stack=args.strict_stack)
    try:
        result = analyze(parsed.program(), config)
    except InternalFault as exc:
        print(f"easycalc: internal error: {exc}", file=sys.stderr)
        return EXIT_INTERNAL
    print_result(result, sys.stdout, as_json=args.json)
    return EXIT_OK if result.ok else EXIT_SEMANTIC


if __name__ == "__main__":
    sys.exit(main())
