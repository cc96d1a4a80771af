"""Shared constants for the season statistics engine."""

# Day classification labels on match records
WEEKEND = "Weekend"
MIDWEEK = "Midweek"

# Literal weekday names found on legacy records
WEEKEND_DAY_NAMES = frozenset({"Saturday", "Sunday"})
MIDWEEK_DAY_NAMES = frozenset({"Monday", "Tuesday", "Wednesday", "Thursday", "Friday"})

# Attendance leaderboard categories (player availability)
ALLGAMES = "ALLGAMES"
WEEKEND_CATEGORY = "WEEKEND"
MIDWEEK_CATEGORY = "MIDWEEK"
OTHERS = "Others"
CATEGORIES = (ALLGAMES, WEEKEND_CATEGORY, MIDWEEK_CATEGORY, OTHERS)

# Appearance group status
REGULAR = "REGULAR"
ONLOAN = "ONLOAN"

# Position given to players with no usable profile
DEFAULT_POSITION = ("MID",)

# Goals in a single match that count as a hat-trick
HAT_TRICK_GOALS = 3

# Canonical match id format (DD-MM-YYYY) and display date format
MATCH_ID_FORMAT = "%d-%m-%Y"
MATCH_DATE_FORMAT = "%d/%m/%Y"
