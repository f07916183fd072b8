"""Constants and defaults shared across feature modules."""

# Wire format of presence timestamps, matches SQLite CURRENT_TIMESTAMP
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

DEMO_TEAMS = ("Sales", "Operations", "Support")
