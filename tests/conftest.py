"""
Configure pytest environment.

This file is automatically loaded by pytest and used to set up the test environment.
"""
import sys
from pathlib import Path

# Add the project root directory to the Python path
# This allows tests to import pool_runner without installing it
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
