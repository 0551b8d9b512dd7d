import subprocess
import sys

# (label, command, report file); run through 'uv run' so the project's environment is used
CHECKS = [
    ("lint", ["uv", "run", "ruff", "check", "."], "ruff_output.txt"),
    ("types", ["uv", "run", "mypy", "src"], "mypy_output.txt"),
    ("tests", ["uv", "run", "pytest", "-v"], "test_output.txt"),
]


def run_check(label, command, output_file):
    print(f"[{label}] {' '.join(command)}")
    try:
        with open(output_file, "w") as f:
            result = subprocess.run(command, stdout=f, stderr=subprocess.STDOUT, text=True)
    except OSError as e:
        print(f"[{label}] could not start: {e}")
        return 1
    print(f"[{label}] exit code {result.returncode} (report: {output_file})")
    return result.returncode


def main():
    selected = set(sys.argv[1:])
    failed = [
        label
        for label, command, output_file in CHECKS
        if (not selected or label in selected) and run_check(label, command, output_file) != 0
    ]
    if failed:
        print(f"Failed checks: {', '.join(failed)}")
        sys.exit(1)
    print("All checks passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
