"""Architecture validation tests.

These tests verify that archguard keeps its own layering: pytestarch
checks the dependency direction, and archguard checks itself with
define_module rules.
"""
