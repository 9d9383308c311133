import sys
import os

# Make tests/samples.py importable from the sub-directories
tests_root = os.path.dirname(os.path.abspath(__file__))
if tests_root not in sys.path:
    sys.path.insert(0, tests_root)
