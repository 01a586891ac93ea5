"""
Command line interface for archguard.

- check: analyse a source tree and evaluate a policy file
- modules: print the module table of a policy file
"""

from archguard.cli.main import cli, main

__all__ = ["cli", "main"]
