"""
Root conftest - shared pytest configuration and fixtures.
Ensures calendar_backend package is discoverable when running pytest from the repository root.
"""
import sys
from pathlib import Path

# Ensure repository root is in path for 'from calendar_backend...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
