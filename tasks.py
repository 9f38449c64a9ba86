"""Invoke tasks for aws-inventory project."""

import sys

from invoke import task

PACKAGE = "aws_inventory"


@task
def test(c, scope="all", verbose=False, coverage=False):
    """Run the test suite.

    Args:
        scope: all, unit or integration
        verbose: Show verbose output
        coverage: Report coverage for the package
    """
    cmd = "pytest" if scope == "all" else f"pytest tests/{scope}"
    if verbose:
        cmd += " -v"
    if coverage:
        cmd += f" --cov={PACKAGE} --cov-report=term-missing"
    c.run(cmd)


@task
def quality(c, fix=False):
    """Run black, ruff and mypy.

    Args:
        fix: Rewrite files instead of only checking them
    """
    c.run(f"black {PACKAGE}/ tests/ tasks.py" + ("" if fix else " --check"))
    c.run(f"ruff check {PACKAGE}/ tests/" + (" --fix" if fix else ""))
    c.run(f"mypy {PACKAGE}/")


@task
def clean(c):
    """Remove build output, caches and the scratch prefix."""
    for pattern in ("build/", "dist/", "*.egg-info", ".pytest_cache/", ".coverage", ".mypy_cache/", ".ruff_cache/"):
        c.run(f"rm -rf {pattern}", warn=True)
    c.run("find . -name __pycache__ -type d -prune -exec rm -rf {} +", warn=True)


@task
def smoke(c, prefix="build/prefix"):
    """Provision this source tree into a scratch prefix and run the smoke test.

    Args:
        prefix: Install prefix to provision
    """
    c.run(f"aws-inventory install --prefix {prefix} --source . --assets {PACKAGE}")
    c.run(f"aws-inventory post-install --prefix {prefix} --user-config-dir {prefix}/home/.aws-inventory")
    c.run(f"aws-inventory test --prefix {prefix}", env={"AWS_INVENTORY_PYTHON": sys.executable})
    print("✅ Smoke test passed")


@task(pre=[quality, test])
def ci(c):
    """Run all CI checks (quality + tests)."""
    print("✅ All CI checks passed!")
