#!/usr/bin/env python3
"""
MediAssist - Medical assistant reply renderer

Simple usage:
    python mediassist.py ask "Is Ginger Tea good for nausea?"
    python mediassist.py ask "How to take Amoxicillin?" -o report.docx
    python mediassist.py render reply.md        # Re-render a saved reply
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from mediassist.cli import app

if __name__ == "__main__":
    app()
