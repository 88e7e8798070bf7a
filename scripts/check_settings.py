"""Resolve the service settings from the environment and print them.

Usage:
    uv run python -m scripts.check_settings
    RHO_WEB=true RHO_LOGLEVEL=debug uv run python -m scripts.check_settings
Exits 0 when settings resolve, 1 with the error message otherwise.
"""

import sys

from frontdoor.core.config import resolve_settings
from frontdoor.domain.exceptions import FrontdoorException


def main() -> int:
    """Print the resolved summary, enabled modes, and listen address."""
    try:
        settings = resolve_settings()
    except FrontdoorException as e:
        print(f"{e.error_code}: {e.message}", file=sys.stderr)
        return 1

    for key, value in settings.summary().items():
        print(f"{key}: {value}")
    print(f"docker host: {settings.docker_host} (tls={settings.docker_tls})")
    print(f"image: {settings.image}")
    print(f"poll: {settings.poll}ms")
    print(f"modes: {', '.join(settings.modes)}")
    print(f"listen address: {settings.listen_addr}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
