"""Static test and country catalogs.

This package provides the built-in test catalog, option grouping for
the test and country selectors, and YAML catalog loading.
"""
