"""
appdocs: lifecycle-state-dependent application documents.

Builds the PDF an applicant receives for a pending, activated or in-review
investment application: selects the view model for the application state,
computes portfolio aggregates and review messages, and hands the result to
the markup and PDF renderers.
"""

__version__ = "0.1.0"
