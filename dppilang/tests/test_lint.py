"""
Tests for the DPPI script check in the lint runner.
"""
from scripts.lint import EXAMPLES_DIR, check_scripts
from dppilang.tests.utils import EXAMPLES_DIR as TEST_EXAMPLES_DIR


def test_bundled_examples_parse():
    scripts = sorted(EXAMPLES_DIR.rglob("*.dppi"))
    assert scripts
    assert check_scripts(scripts) == []


def test_reports_broken_script():
    broken = TEST_EXAMPLES_DIR / "broken.dppi"
    [problem] = check_scripts([TEST_EXAMPLES_DIR / "scopes.dppi", broken])
    assert problem.startswith(f"{broken}: UnexpectedToken: ")


def test_reports_missing_script(tmp_path):
    missing = tmp_path / "missing.dppi"
    [problem] = check_scripts([missing])
    assert problem.startswith(f"{missing}: ")
