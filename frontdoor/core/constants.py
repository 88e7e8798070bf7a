"""Core constants: environment variable names and configuration defaults.

Single source of truth for the literal values the settings resolver falls
back to (DRY). Used by frontdoor.core.config and the check_settings script.
"""

# Prefix for the service's own variables (RHO_PORT, RHO_WEB, ...)
ENV_PREFIX = "RHO_"

# Unprefixed Docker client variables, read only as fallbacks
DOCKER_ENV_PREFIX = "DOCKER_"

DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "info"
DEFAULT_MONGO_URL = "mongo"
DEFAULT_POLL_MS = 500
DEFAULT_IMAGE = "cloudpipe/runner-py2"
DEFAULT_DOCKER_HOST = "unix:///var/run/docker.sock"

# Certificate root under the current user's home directory
DOCKER_CERT_DIR = ".docker"
DOCKER_CA_CERT_FILE = "ca.pem"
DOCKER_CERT_FILE = "cert.pem"
DOCKER_KEY_FILE = "key.pem"
