# core/settings.py

"""
Program-wide defaults for the assignment tracker.

Every value here can be overridden per instance through constructor keyword arguments.
"""

# seconds between a state change and its scheduled follow-up (working -> submitted -> graded)
GRADING_DELAY_SECONDS: float = 0.5

# grades strictly above the threshold pass
PASS_THRESHOLD: int = 50

# inclusive bounds for simulated grades
MIN_GRADE: int = 0
MAX_GRADE: int = 100
