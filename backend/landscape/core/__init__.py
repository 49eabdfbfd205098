"""
Core static data for the Landscape Intelligence Network.

The taxonomy tables here are configuration, not derived state:
they must be fully populated at import time and are never mutated.
"""
