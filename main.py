#!/usr/bin/env python3
# ~/crimson-interpreter/main.py
"""
Legacy runner - forwards to the CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from crimson.cli.main import cli

_COMMANDS = {'run', 'check', 'tokens', 'init', '--help', '--version'}

if __name__ == "__main__":
    if len(sys.argv) == 1:
        print("Usage: main.py <filename.crm>", file=sys.stderr)
        sys.exit(1)

    # Support legacy: main.py program.crm -> crm run program.crm
    if len(sys.argv) == 2 and sys.argv[1] not in _COMMANDS:
        sys.argv.insert(1, 'run')

    cli()
