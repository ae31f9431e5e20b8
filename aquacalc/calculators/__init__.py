"""
Deterministic aquaculture calculators.

Pure Python math over submitted form fields. Each calculator takes a plain
dict of fields and returns a plain dict of numbers and recommendation lists.
"""
