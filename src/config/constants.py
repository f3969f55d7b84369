"""Constants for the configuration module."""

# Log component names
COMPONENT_CONFIG = "config"
COMPONENT_CLI = "cli"

# Synthetic error types for failures outside pydantic validation
ERROR_TYPE_FILE_NOT_FOUND = "file_not_found"
ERROR_TYPE_YAML_PARSE = "yaml_parse_error"
ERROR_TYPE_FILE_READ = "file_read_error"
