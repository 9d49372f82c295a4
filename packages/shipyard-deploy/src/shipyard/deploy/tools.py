"""Detection of external command line tools."""

import shutil


def in_path(binary: str) -> bool:
    return shutil.which(binary) is not None


def gcloud_in_path() -> bool:
    """Return True if the `gcloud` command is on this machine's PATH."""
    return in_path("gcloud")
