"""Estimate time spent on a project from the timestamps of its saved files."""
