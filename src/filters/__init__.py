"""Filter-configuration engine.

This package decides which filter fields apply to a test type,
validates field values, and reduces user edits into submittable filters.
"""
