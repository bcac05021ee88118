"""Matching — value extraction and first-match-wins recognition.

Matching is a pure function of the template and the URL; nothing here
holds mutable state, so one Recognizer can serve many threads.
"""
