"""
Main module entry point.

Runs the API server: python -m wms_analytics.main
"""

from .server import main

if __name__ == "__main__":
    main()
