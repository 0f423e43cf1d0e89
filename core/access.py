"""Restricting package visibility with `npm access`."""

import logging
import re
import subprocess

from .errors import AccessCommandFailed, UnscopedPackage

logger = logging.getLogger(__name__)

UNSCOPED_PATTERN = re.compile(r"Sorry, you can't change the access level of unscoped packages", re.IGNORECASE)


def is_scoped(package_name: str) -> bool:
    """Check whether a package name is scoped, e.g. "@owner/name"."""
    return bool(re.match(r"^@[^/]+/.+", package_name))


def restrict_access(package_name: str, npm_command: str = "npm") -> None:
    """Run `npm access restricted` for a published package.

    Args:
        package_name: Name of the package, e.g. "@mattmueller/cheerio"
        npm_command: npm executable to invoke

    Raises:
        UnscopedPackage: If npm refuses because the package is unscoped
        AccessCommandFailed: If the command fails for any other reason
    """
    command = [npm_command, "access", "restricted", package_name]
    logger.info("Running: %s", " ".join(command))

    try:
        completed = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError as e:
        raise AccessCommandFailed(f"Could not run {npm_command}: {e}", package=package_name, cause=e) from e

    if completed.returncode == 0:
        logger.debug("Restricted access to %s", package_name)
        return

    output = f"{completed.stdout or ''}{completed.stderr or ''}"
    if UNSCOPED_PATTERN.search(output):
        raise UnscopedPackage(
            f"Can't change the access level of unscoped package {package_name}",
            package=package_name,
            output=output,
        )

    logger.warning("npm access failed for %s (exit %s)", package_name, completed.returncode)
    raise AccessCommandFailed(
        f"npm access restricted {package_name} failed with exit code {completed.returncode}",
        package=package_name,
        output=output,
    )
