"""Logger namespacing for modfile.

Every module logs under the "modfile." hierarchy so applications can tune
the package with one logger. Parsing logs a single DEBUG record per
successful parse (module name and entry counts). Parse failures are raised
to the caller and never logged.

Example:
    >>> import logging
    >>> logging.getLogger("modfile").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Names outside the package hierarchy are moved under "modfile.".

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'modfile.mymodule'
    """
    if not (name == "modfile" or name.startswith("modfile.")):
        name = f"modfile.{name}"
    return logging.getLogger(name)
