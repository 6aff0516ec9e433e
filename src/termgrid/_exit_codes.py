"""Semantic exit codes."""

NOT_FOUND = 2
BAD_INPUT = 4
OUT_OF_RANGE = 5
