"""
Test runner script for Plant Match unit tests
"""
import sys
import subprocess

def run_tests():
    """Run pytest with appropriate options"""
    print("=" * 80)
    print("Running Plant Match Unit Tests")
    print("=" * 80)
    print()
    
    result = subprocess.run(
        [
            sys.executable, "-m", "pytest",
            "tests",
            "-v",  # Verbose
            "--tb=short",  # Short traceback format
            "--color=yes",
        ],
        cwd="."
    )
    
    return result.returncode

if __name__ == "__main__":
    exit_code = run_tests()
    sys.exit(exit_code)
