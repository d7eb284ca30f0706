"""Small, stateless helpers shared across the application.

Scope:
- Pure functions with no dependencies beyond the standard library.
- No configuration lookups and no logging side effects; anything that needs
  configuration lives in ``stuff.config`` / ``stuff.channel_log``.
- Organized by single-purpose modules (``text.py``, ``sequences.py``,
  ``paths.py``, ``query.py``) rather than one catch-all file.

Behavior on bad input:
- Helpers degrade instead of raising: nullish inputs become empty strings,
  failed lookups give ``None``, unmatched searches are no-ops.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
