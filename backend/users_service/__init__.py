"""User accounts and login sessions over HTTP."""
