"""Core — errors, domain types and password hashing. No IO, no framework imports."""
