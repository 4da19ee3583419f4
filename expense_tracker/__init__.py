"""
Expense Tracker - Source Package

A small command-line tool for recording, deleting and listing
personal expenses, persisted to a local JSON datastore.

DESIGN PRINCIPLES:
1. The datastore file is the single source of truth
2. Every mutation rewrites the whole file
3. Fail early, fail visibly
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
