"""Infrastructure — store session manager and logging setup."""
