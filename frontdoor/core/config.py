"""Service configuration (settings resolved from the environment).

Single source of truth for startup configuration. Raw values are loaded by
pydantic-settings from RHO_* variables (and .env), then defaulted from the
unprefixed DOCKER_* variables and the current user's home directory, then
validated. The result is a frozen Settings shared for the process lifetime.
"""

import os
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    NonNegativeInt,
    PositiveInt,
    SecretStr,
    ValidationError,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from frontdoor.core.constants import (
    DEFAULT_DOCKER_HOST,
    DEFAULT_IMAGE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MONGO_URL,
    DEFAULT_POLL_MS,
    DEFAULT_PORT,
    DOCKER_CA_CERT_FILE,
    DOCKER_CERT_DIR,
    DOCKER_CERT_FILE,
    DOCKER_ENV_PREFIX,
    DOCKER_KEY_FILE,
    ENV_PREFIX,
)
from frontdoor.domain.enums import LogLevel
from frontdoor.domain.exceptions import EnvironmentException, ValidationException


class EnvironmentSettings(BaseSettings):
    """Values loaded directly from the service's RHO_* variables.

    A field is None when its variable is absent or empty, so callers can
    tell "not configured" apart from a configured false or zero.
    """

    port: NonNegativeInt | None = None
    loglevel: str | None = None
    mongourl: str | None = None
    adminname: str | None = None
    adminkey: SecretStr | None = None
    dockerhost: str | None = None
    dockertls: bool | None = None
    dockercacert: str | None = None
    dockercert: str | None = None
    dockerkey: str | None = None
    image: str | None = None
    poll: NonNegativeInt | None = None
    web: bool | None = None
    runner: bool | None = None

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
    )


class DockerEnvironment(BaseSettings):
    """Docker client variables (DOCKER_HOST, DOCKER_CERT_PATH) used as fallbacks."""

    host: str | None = None
    cert_path: str | None = None

    model_config = SettingsConfigDict(
        env_prefix=DOCKER_ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
    )


class Settings(BaseModel):
    """Resolved service settings.

    Every field is populated and validated. Instances are immutable and
    safe to share between the web front-end and the runner.
    """

    model_config = ConfigDict(frozen=True)

    port: PositiveInt = DEFAULT_PORT
    log_level: LogLevel = LogLevel.INFO
    mongo_url: str = DEFAULT_MONGO_URL
    admin_name: str = ""
    admin_key: SecretStr = SecretStr("")
    docker_host: str = DEFAULT_DOCKER_HOST
    docker_tls: bool = False
    docker_ca_cert: str = ""
    docker_cert: str = ""
    docker_key: str = ""
    image: str = DEFAULT_IMAGE
    poll: PositiveInt = DEFAULT_POLL_MS  # milliseconds
    web: bool = True
    runner: bool = True

    @property
    def listen_addr(self) -> str:
        """Address for the HTTP server to bind, e.g. ":8000"."""
        return f":{self.port}"

    @property
    def modes(self) -> list[str]:
        """Names of the enabled modes ("web", "runner")."""
        return [name for name, enabled in (("web", self.web), ("runner", self.runner)) if enabled]

    def summary(self) -> dict[str, Any]:
        """Return the non-secret values logged at startup."""
        return {
            "port": self.port,
            "logging level": self.log_level.value,
            "mongo URL": self.mongo_url,
            "admin account": self.admin_name,
        }


def current_user_home() -> str:
    """Return the home directory of the OS user running the process.

    Raises:
        EnvironmentException: If the OS cannot identify the current user.
    """
    if os.name != "posix":
        try:
            return str(Path.home())
        except RuntimeError as exc:
            raise EnvironmentException(f"Unable to read the current OS user: {exc}") from exc

    import pwd

    # The passwd record, not $HOME, identifies the caller.
    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError as exc:
        raise EnvironmentException(f"Unable to read the current OS user: {exc}") from exc


def _load_environment() -> EnvironmentSettings:
    try:
        return EnvironmentSettings()
    except ValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error.get("loc") else None
        variable = f"{ENV_PREFIX}{field.upper()}" if field else "environment"
        raise ValidationException(
            f"Invalid value for {variable}: {error['msg']}", field=field
        ) from exc


def resolve_settings(
    environment: EnvironmentSettings | None = None,
    docker_environment: DockerEnvironment | None = None,
    home_dir: Callable[[], str] = current_user_home,
) -> Settings:
    """Resolve, default, and validate the service settings.

    Each step only fills what the previous one left unset: RHO_* values,
    then fixed defaults, then DOCKER_HOST / DOCKER_CERT_PATH, then the
    user's ~/.docker directory.

    Args:
        environment: Pre-loaded RHO_* values; loaded from the process when None.
        docker_environment: Pre-loaded DOCKER_* values; loaded when None.
        home_dir: Returns the current user's home directory.

    Returns:
        Fully populated Settings.

    Raises:
        ValidationException: Uncoercible value, unknown log level, or both
            RHO_WEB and RHO_RUNNER explicitly disabled.
        EnvironmentException: The current OS user could not be determined.
    """
    env = environment if environment is not None else _load_environment()
    docker = docker_environment if docker_environment is not None else DockerEnvironment()

    docker_host = env.dockerhost or docker.host or DEFAULT_DOCKER_HOST

    cert_root = docker.cert_path or os.path.join(home_dir(), DOCKER_CERT_DIR)
    docker_ca_cert = env.dockercacert or os.path.join(cert_root, DOCKER_CA_CERT_FILE)
    docker_cert = env.dockercert or os.path.join(cert_root, DOCKER_CERT_FILE)
    docker_key = env.dockerkey or os.path.join(cert_root, DOCKER_KEY_FILE)

    log_level = LogLevel.parse(env.loglevel or DEFAULT_LOG_LEVEL)

    web, runner = bool(env.web), bool(env.runner)
    if not web and not runner:
        # Both present but falsy is an explicit request to run nothing.
        if env.web is not None and env.runner is not None:
            raise ValidationException(
                f"At least one mode must be enabled: set {ENV_PREFIX}WEB or {ENV_PREFIX}RUNNER to true",
                field="web",
            )
        web, runner = True, True

    return Settings(
        port=env.port or DEFAULT_PORT,
        log_level=log_level,
        mongo_url=env.mongourl or DEFAULT_MONGO_URL,
        admin_name=env.adminname or "",
        admin_key=env.adminkey or SecretStr(""),
        docker_host=docker_host,
        docker_tls=bool(env.dockertls),
        docker_ca_cert=docker_ca_cert,
        docker_cert=docker_cert,
        docker_key=docker_key,
        image=env.image or DEFAULT_IMAGE,
        poll=env.poll or DEFAULT_POLL_MS,
        web=web,
        runner=runner,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached service settings (single instance per process).

    Resolution runs on first call, not at import time. In tests, call
    get_settings.cache_clear() after changing env vars.

    Returns:
        Resolved Settings instance.
    """
    return resolve_settings()
