"""
conftest.py - placed at the project root so pytest finds it automatically.

Inserts the project root into sys.path so `core.*` and `apps.*` import in
tests without `pip install -e .` first.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
