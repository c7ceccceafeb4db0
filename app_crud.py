#!/usr/bin/env python3
"""
Database CRUD Demo

Creates, reads, updates and deletes a demo row in the productos table.
Run sql/schema.sql (and optionally sql/data.sql) against the database first.

Usage:
    python app_crud.py
"""

import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from conexion_db.app import main_crud


if __name__ == "__main__":
    exit(main_crud())
