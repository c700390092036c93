"""
Central constants for the depot-client package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Configuration
# ============================================================================

# Default location of the CLI configuration file
DEFAULT_CONFIG_PATH = "~/.config/depot/cli.toml"

# Default directory for downloaded public keys
DEFAULT_KEY_CACHE_PATH = "/opt/bldr/cache/keys"

# Default directory for cached package archives
DEFAULT_PACKAGE_CACHE_PATH = "/opt/bldr/cache/pkgs"

# Environment variable consulted for the depot URL
DEPOT_URL_ENVVAR = "DEPOT_URL"

# ============================================================================
# API and Network Constants
# ============================================================================

# Default timeout for HTTP requests (seconds)
# Large archives are streamed within a single request
DEFAULT_TIMEOUT = 300.0

# Timeout for establishing a connection (seconds)
CONNECT_TIMEOUT = 10.0

# Maximum number of pooled connections
DEFAULT_MAX_CONNECTIONS = 10

# Response header carrying the file name of a download
X_FILENAME_HEADER = "X-Filename"

# ============================================================================
# Transfer Constants
# ============================================================================

# Bytes moved per read during uploads and downloads
BUFFER_SIZE = 100_000

# Suffix of the staging file written during a download
TEMP_SUFFIX = ".tmp"

# Length shown in progress output when the server sends no Content-Length
UNKNOWN_LENGTH = "Unknown"

# File extension of package archives in the cache
PACKAGE_ARCHIVE_EXTENSION = ".bldr"
