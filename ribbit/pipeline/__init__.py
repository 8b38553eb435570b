"""
pipeline package
----------------
Journal processing: load → tally → report, plus the command-line interface.
"""
