#!/usr/bin/python
# -*- coding: utf-8 -*-
"""
This package updates the version field of a Flutter pubspec.yaml and
increments its build number.
"""

from .exceptions import MissingArgumentError
from .exceptions import VersionFieldNotFoundError
from .updater import UpdateResult
from .updater import VersionUpdater
from .utils import find_version
from .utils import parse_build_number
from .utils import replace_version

from .metadata import __version__
