"""ESAS triage engine.

Deterministic screening of Edmonton Symptom Assessment System answers into
a risk band, a primary symptom and a matched intervention protocol.
"""

__version__ = "0.1.0"
