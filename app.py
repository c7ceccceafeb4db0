#!/usr/bin/env python3
"""
Database Connection Demo

Loads config/jdbc.properties, connects to the database and runs the test query.

Usage:
    python app.py
"""

import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from conexion_db.app import main


if __name__ == "__main__":
    exit(main())
