"""Design Patterns - Root Package.

Independent, textbook demonstrations of classic object-oriented design
patterns, each implemented in isolation behind a small abstract interface.

Key Components:
    - domain: Pattern interfaces (ports) and the exception hierarchy
    - patterns: Creational, structural and behavioral pattern implementations
    - infrastructure: Logging and process-wide singleton management
    - config: Configuration schemas and loading
    - cli: Command line entry point narrating each pattern

Usage:
    >>> design-patterns
    >>> design-patterns observer strategy --log-level INFO
"""

from ._version import __version__

__author__ = "Design Patterns Maintainers"
__package_name__ = "design-patterns"
