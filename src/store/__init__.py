"""Sample file storage layer.

This package owns the binary sample codec and whole-file persistence.
It powers the edit and list workflows used by the SDK and CLI.
"""
