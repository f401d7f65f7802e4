# src/tests/conftest.py
"""
Genera el parser de EasyCalc.g4 antes de recolectar los tests.

Los módulos generados no se versionan. Si faltan y el comando `antlr4`
(paquete antlr4-tools, extra "dev") está en el PATH, se generan aquí con la
misma versión que el runtime instalado. Sin la herramienta, los tests que
necesitan el parser se saltan.
"""
import logging
import shutil
import subprocess
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

log = logging.getLogger(__name__)

ANTLR_DIR = Path(__file__).resolve().parent.parent / "parsing" / "antlr"
GRAMMAR = "EasyCalc.g4"


def _antlr_command():
    tool = shutil.which("antlr4")
    if tool is None:
        return None
    cmd = [tool]
    try:
        cmd += ["-v", version("antlr4-python3-runtime")]
    except PackageNotFoundError:
        pass
    return cmd + ["-Dlanguage=Python3", "-visitor", "-no-listener", GRAMMAR]


def pytest_configure(config):
    if (ANTLR_DIR / "EasyCalcParser.py").exists():
        return
    cmd = _antlr_command()
    if cmd is None:
        log.warning("antlr4 not found; parser-dependent tests will be skipped")
        return
    proc = subprocess.run(cmd, cwd=ANTLR_DIR, capture_output=True, text=True)
    if proc.returncode != 0:
        log.warning("antlr4 failed (%d): %s", proc.returncode, proc.stderr.strip())
