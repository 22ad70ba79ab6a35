"""
connect4engine.interfaces - User interfaces for Connect Four

Front-ends that drive a GameEngine and display what it reports.
"""

# Don't import anything here to avoid circular imports
__all__ = []
