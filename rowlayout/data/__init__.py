"""
Default data files for RowLayout
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

# Demo spec: right-aligned rows of small/normal items
DEFAULT_DEMO_SPEC = os.path.join(DATA_DIR, 'demo_layout.json')
