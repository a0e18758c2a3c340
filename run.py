"""
Entry Point Script (Bootstrap)
==============================
This script is the absolute starting point of the application for development.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' to ensure Python can resolve imports like
   'from bouncingball.model...' without installing the package.

Usage:
    $ python run.py [--width 640] [--height 480] [--fps 30] [--log-level DEBUG]
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from bouncingball.__main__ import run

if __name__ == "__main__":
    sys.exit(run())
