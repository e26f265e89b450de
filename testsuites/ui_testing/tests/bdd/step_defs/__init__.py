"""Step definitions for the login feature files."""
