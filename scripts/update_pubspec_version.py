#!/usr/bin/env python
"""
Release step: set the version in ../pubspec.yaml and increment its build number.
Usage: python scripts/update_pubspec_version.py 1.2.3
"""
import sys
from pathlib import Path

from pubspec_bump.cli import main

PUBSPEC = Path(__file__).resolve().parent.parent / "pubspec.yaml"

if __name__ == "__main__":
    sys.exit(main(default_pubspec=PUBSPEC))
