import re

from pubspec_bump.exceptions import VersionFieldNotFoundError

# The value stops at either line terminator so `\r\n` files keep their `\r`.
VERSION_PATTERN = re.compile(r"version:\s*([^\r\n]+)")
BUILD_DIGITS = re.compile(r"\s*([0-9]+)")


def read_text(path):
    """Read `path` as UTF-8 without translating line endings."""
    with open(path, "r", encoding="utf-8", newline="") as fp:
        return fp.read()


def write_text(path, content):
    """Overwrite `path` with `content` as UTF-8, line endings untouched."""
    with open(path, "w", encoding="utf-8", newline="") as fp:
        fp.write(content)


def find_version(content, filename="pubspec.yaml"):
    """Return the trimmed value of the first `version:` line.

    Parameters
    ----------
        content : str
            Full text of the version file.
        filename : str
            Used in the error message only.

    Returns
    -------
        version : str
            E.g. `"1.2.3+4"`.

    Raises
    ------
        VersionFieldNotFoundError
            If no line matches `version:\\s*(.+)`.
    """
    match = VERSION_PATTERN.search(content)
    if match is None:
        raise VersionFieldNotFoundError(filename)
    return match.group(1).strip()


def parse_build_number(version):
    """Extract the build number from a `"<base>+<build>"` string.

    Reads the leading digits after the first `+`. A version without `+`,
    a suffix with no leading digits, or a build of 0 all count as build 1.

    Example
    -------
        >>> parse_build_number("1.2.3+41")
        41
        >>> parse_build_number("1.2.3+abc")
        1
    """
    if "+" not in version:
        return 1

    suffix = version.split("+")[1]
    match = BUILD_DIGITS.match(suffix)
    if match is None:
        return 1
    return int(match.group(1)) or 1


def format_version(base, build):
    return f"{base}+{build}"


def replace_version(content, new_version):
    """Replace the first version line's value, leaving the rest of `content` as is."""
    return VERSION_PATTERN.sub(
        lambda _: f"version: {new_version}", content, count=1
    )
