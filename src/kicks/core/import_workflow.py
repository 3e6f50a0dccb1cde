"""Extract an externally supplied config bundle into the config store."""

import logging
from pathlib import Path

from kicks.core.context import KicksContext
from kicks.core.errors import MissingFileError

logger = logging.getLogger(__name__)


def import_config_bundle(
    ctx: KicksContext, archive: Path, project: str | None, *, quiet: bool
) -> Path:
    """Extract a config bundle archive into the config store.

    The archive contents are not validated.

    Args:
        ctx: Kicks context
        archive: Archive to extract
        project: Project subdirectory, or None for the store root
        quiet: Capture the archive tool's output

    Returns:
        Directory the archive was extracted into

    Raises:
        MissingFileError: If the archive does not exist
        ExternalCommandError: If extraction fails
    """
    if not archive.exists():
        raise MissingFileError(f"Archive not found: {archive}")

    target = ctx.config_store.project_dir(project)
    target.mkdir(parents=True, exist_ok=True)
    logger.debug("Importing %s into %s", archive, target)

    cmd = ["unzip", "-o"]
    if quiet:
        cmd.append("-q")
    cmd.extend([str(archive), "-d", str(target)])
    ctx.shell.run(cmd, cwd=None, operation=f"extract {archive.name}", quiet=quiet)

    ctx.feedback.success(f"Imported {archive} into {target}")
    return target
