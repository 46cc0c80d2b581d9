"""Development script to run checks (linting, types, tests) and the index dump."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally index a facts directory."""
    parser = argparse.ArgumentParser(
        description="Run development checks and optionally dump an index."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Check only, without auto-fixing"
    )
    parser.add_argument(
        "--facts-dir", help="After the checks, index this directory of fact files"
    )
    args = parser.parse_args()

    if not args.ci:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")

    run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
    run_command(["uv", "run", "mypy"], "Type Checking")
    run_command(
        [
            "uv",
            "run",
            "pytest",
            "--cov=doc_index",
            "--cov-report=term-missing",
            "--cov-fail-under=90",
        ],
        "Tests",
    )

    if args.facts_dir:
        run_command(
            ["uv", "run", "python", "main.py", args.facts_dir],
            "Index Dump",
        )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
