#!/usr/bin/env python3
"""
Main entry point for running the Password Security Toolkit as a module.
"""

import sys
from password_toolkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
