"""Store Presence Tracker package.

Organized by feature modules (teams, employees, presence) with a thin Flask
JSON controller layer over service and SQLite repository layers.
"""
