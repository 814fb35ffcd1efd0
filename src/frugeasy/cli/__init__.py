"""
Command Line Interface Package

Command-line front end over the analysis engine.

Command Structure:
- frugeasy: Main entry point with utility commands (version, config)
- frugeasy summary: Monthly report, nudges and daily activity for a snapshot

The CLI is the only layer that reads the wall clock; it passes the current
time into the engine explicitly.
"""
