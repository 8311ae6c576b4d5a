"""
Lint script runner.

Runs flake8 and pylint over the Python sources, then parses every `.dppi`
script under ``examples/`` and reports the first syntax error in each.
"""
import os
import subprocess
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from dppilang.exceptions import DppiError  # noqa: E402
from dppilang.parser import Parser  # noqa: E402

EXAMPLES_DIR = BASE_DIR / "examples"


def check_scripts(paths) -> list[str]:
    """
    Parse each DPPI script, returning one ``path: message`` line per failure.

    Args:
        paths: Paths of `.dppi` scripts.

    Returns:
        list[str]: Problems found, empty when every script parses.
    """
    problems = []
    for path in paths:
        try:
            Parser(Path(path).read_text(encoding="utf-8")).parse_program()
        except DppiError as e:
            problems.append(f"{path}: {type(e).__name__}: {e}")
        except OSError as e:
            problems.append(f"{path}: {e.strerror}")
    return problems


def main():
    """
    Lint the DPPI project using flake8, pylint and the DPPI parser.
    """
    os.chdir(BASE_DIR)

    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./dppilang",
        "./dppi.py",
        "--exclude=dppilang/tests"
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./dppilang",
        "./dppi.py",
        "--ignore=tests"
    ], check=True)

    print("Checking DPPI scripts...")
    problems = check_scripts(sorted(EXAMPLES_DIR.rglob("*.dppi")))
    for problem in problems:
        print(problem)
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
