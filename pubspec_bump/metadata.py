__version__ = "0.1.0"
__author__ = "Pubspec Bump Contributors"
__email__ = "maintainers@pubspec-bump.invalid"
