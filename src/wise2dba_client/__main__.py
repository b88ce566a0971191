#!/usr/bin/env python3
"""
Main entry point for running the Wise2DBA client as a module.
"""

from .main import main

if __name__ == "__main__":
    main()
