"""Document storage layer.

This module persists payment metadata documents under date-partitioned
keys on the local filesystem or in an S3-compatible object store.
"""
