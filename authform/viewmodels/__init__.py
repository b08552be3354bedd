"""ViewModel package for auth form state and display text.

Call context:
    UI code binds its controls to ``FormVM`` / ``FieldState`` and calls
    ``FormVM.submit`` around auth requests.

Dependencies:
    Domain types plus the error-routing use cases. Transport stays outside.

Responsibilities:
    - Hold per-field and global error slots.
    - Turn routed error items and password messages into display strings.
"""
