"""
jobmatch - keyword-based job and candidate matching for the job board.

Scores job postings against candidate profiles, ranks the results and
exposes a few related text utilities (skill extraction, resume analysis,
skill suggestions).
"""

__app_name__ = "jobmatch"
__version__ = "0.1.0"
