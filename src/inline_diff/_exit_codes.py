"""Semantic exit codes, following diff(1) conventions."""

SUCCESS = 0
CHANGES_FOUND = 1
ERROR = 2
