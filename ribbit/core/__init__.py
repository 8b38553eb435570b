"""
core package
------------
Paths, logging, exceptions and validation shared by every Ribbit component.
"""
