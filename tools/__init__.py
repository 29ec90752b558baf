"""Offline data tools (run with python -m tools.<name>)."""
