#!/usr/bin/env python3
"""
Examples of using the toruslife CLI for different scenarios.
"""

import subprocess


def run_cli_command(args):
    """Run a CLI command and capture its output."""
    cmd = ["toruslife"] + args
    print(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=10)
        print(result.stdout)
        if result.stderr:
            print(f"Stderr: {result.stderr}")
        print("-" * 50)
        return result.returncode == 0
    except subprocess.TimeoutExpired:
        print("Command timed out")
        return False


def main():
    """Run various CLI examples."""
    print("Toroidal Game of Life CLI Examples")
    print("=" * 50)

    examples = [
        (["--list-patterns"], "List all available patterns"),
        (["--once", "--no-clear", "-W", "32", "-H", "16"], "First frame of the reference universe"),
        (["--pattern", "Block", "-W", "8", "-H", "8", "-g", "3", "-d", "0", "--no-clear"],
         "Still life pattern (should be stable)"),
        (["--pattern", "Blinker", "-W", "7", "-H", "7", "-g", "4", "-d", "0", "--no-clear"],
         "Oscillating blinker pattern"),
        (["--pattern", "Glider", "-W", "10", "-H", "10", "-g", "40", "-d", "0", "--no-clear"],
         "Glider crossing the torus seams"),
        (["--seed", "flat-index", "-W", "20", "-H", "10", "-g", "5", "-d", "0", "--no-clear", "--verbose"],
         "Flat-index seed with debug logging"),
    ]

    success_count = 0
    for args, description in examples:
        print(f"\nExample: {description}")
        print("-" * len(f"Example: {description}"))
        if run_cli_command(args):
            success_count += 1
        else:
            print("❌ Failed")

    print(f"\nSummary: {success_count}/{len(examples)} examples completed successfully")


if __name__ == "__main__":
    main()
