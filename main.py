#!/usr/bin/env python3
"""
Main entry point for running github-repo-stats from a source checkout.
"""

import os
import sys

# Add the project directory to the Python path
sys.path.insert(0, os.path.dirname(__file__))

from repo_stats.cli import main

if __name__ == "__main__":
    sys.exit(main())
