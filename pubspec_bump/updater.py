import os
from collections import namedtuple

from pubspec_bump import utils
from pubspec_bump.exceptions import MissingArgumentError

UpdateResult = namedtuple("UpdateResult", ["path", "old_version", "new_version", "build_number"])


class VersionUpdater:
    """Set the base version of a pubspec.yaml and increment its build number.

    The version line is expected to look like `version: 1.2.3+4`. Running the
    updater with base version `"1.3.0"` rewrites it to `version: 1.3.0+5`.
    Only the first `version:` line is touched; every other byte of the file is
    written back unchanged.

    The steps are:
        1.  Check the file exists.
        2.  Read it and find the current version value.
        3.  Take the build number after `+` (1 if absent or not numeric).
        4.  Write `version: <base>+<build + 1>` back over the first match.

    Parameters
    ----------
        path : str or os.PathLike
            Location of the pubspec.yaml to update.

    Example
    -------
        >>> updater = VersionUpdater("pubspec.yaml")
        >>> result = updater.run("1.3.0")
        >>> result.new_version
        '1.3.0+5'
    """
    def __init__(self, path):
        self.path = os.fspath(path)
        self.filename = os.path.basename(self.path)

    def run(self, new_base_version):
        """Update the version file in place.

        Parameters
        ----------
            new_base_version : str
                Version without build suffix, e.g. `"1.2.3"`.

        Returns
        -------
            result : UpdateResult
        """
        if not new_base_version:
            raise MissingArgumentError()

        if not os.path.exists(self.path):
            raise FileNotFoundError(f"{self.filename} not found")

        content = utils.read_text(self.path)
        current_version = utils.find_version(content, self.filename)

        new_build_number = utils.parse_build_number(current_version) + 1
        new_version = utils.format_version(new_base_version, new_build_number)

        utils.write_text(self.path, utils.replace_version(content, new_version))

        return UpdateResult(self.path, current_version, new_version, new_build_number)
