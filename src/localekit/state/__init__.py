"""Locale state layer.

This package owns the current locale: it is the only place where a new
locale value is validated, stored and published to listeners, whether the
change came from an explicit call or from the upstream language source.
"""
