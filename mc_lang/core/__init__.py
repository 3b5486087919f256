"""
Core application engine for orchestrating an update run.

The `UpdateManager` selects the releases to process and delegates each one to
the `ReleaseProcessor`.
"""
