"""CLI exit codes."""

SYSTEM_EXIT_CODE = 1
VALIDATION_EXIT_CODE = 2
PROVIDER_EXIT_CODE = 3
