"""
taskorder: dependency-aware priority scheduling for named tasks.

Tasks carry a priority and a deadline and may depend on each other; the
scheduler emits a dependency-respecting order that prefers earlier deadlines,
then higher priorities.
"""

__version__ = "0.1.0"
