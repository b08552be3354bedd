"""Use-case layer for routing auth API errors into form state.

Each module works on already-raised error values and caller-supplied form
fields; none of them performs transport I/O.
"""
