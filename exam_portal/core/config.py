import os

# In-memory only: the roster lives as long as the process.
DATABASE_URL = "sqlite://"

LOG_LEVEL = os.getenv("EXAM_PORTAL_LOG_LEVEL", "INFO")

# Answer script layout
QUESTION_LABELS = ("Q1", "Q2", "Q3", "Q4", "Q5")
PART_LABELS = ("a", "b", "c", "d", "e")

NOT_APPLICABLE = "-"  # part not asked for this question (not the same as 0)
UNEVALUATED_SCORE = "0"  # placeholder until the first save

GRIEVANCE_DATE_FORMAT = "%Y-%m-%d %H:%M"
GRIEVANCE_TEXT_MAX_LENGTH = 2000

UNKNOWN_SUBJECT = "Unknown Subject"
