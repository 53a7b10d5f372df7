"""Personal finance tracker.

Records income and expenses in a local JSON store, validates every write
and derives dashboard figures (balance, monthly spend, budget forecast and
a 7-day expense trend). See ``validators.validate`` and
``analytics.aggregate`` for the core rules, and ``cli.py`` for the entry
point.
"""
__version__ = "0.1.0"
