"""
connect4_engine.interfaces - Front ends for the Connect Four engine

Front ends only read cells and outcomes from the engine and never write
to the grid themselves.
"""

# Don't import anything here to avoid circular imports
__all__ = []
