"""
Snapshot ingestion module.

Parses delimited order records, assembles validated order books and
generates synthetic snapshots for demos and tests.
"""
