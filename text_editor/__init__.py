"""
Text editor tool server: view, create, replace, insert and undo for text files.
"""

__version__ = "1.0.1"
