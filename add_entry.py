#!/usr/bin/env python3
"""
Usage:
  python add_entry.py \\
    --date=2025-03-14 \\
    --slug=manifesto-rules \\
    --thing="finishingthingz manifesto & rules" \\
    --type=system \\
    --proofUrl=/ \\
    --proofText="this page" \\
    --reflection="built the container first."
"""
from entrylog.cli import run

if __name__ == "__main__":
    run()
