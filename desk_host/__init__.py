"""desk_host
Desktop host that keeps the UI thread and background work apart.
"""

__version__ = "0.1.0"
