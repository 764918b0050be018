"""
docworker - queue-driven HTML to PDF/image rendering worker.
"""

__version__ = "0.1.0"
