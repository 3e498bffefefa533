"""
Comparison feature module.

A comparison is a named group of objects plus the ordered list of custom
options that apply to them.
"""
