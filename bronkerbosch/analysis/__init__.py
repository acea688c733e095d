"""Result verification, reports and variant comparison.

Analysis logic stays here as pure functions; `scripts/` orchestrates I/O.
"""
