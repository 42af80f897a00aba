"""Branch developers recipient provider

Works out which commit authors only changed the branch being built.
"""

__version__ = "0.1.0"
