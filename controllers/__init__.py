"""
Controller layer for Colorized.

Controllers coordinate between PyQt views under ``ui/`` and the plain models
and services under ``models/`` and ``services/``. They own the editable state
and emit signals the views render; they never touch widgets directly.
"""
