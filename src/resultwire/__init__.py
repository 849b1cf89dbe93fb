"""resultwire: Result types that stay plain data across process boundaries.

Public API:
    - success() / failure(): construct a Result
    - is_success() / is_failure(): inspect it
    - map(), map_error(), and_then(), or_else(), match(): transform and fold
    - combine_all(), combine_all_errors(): aggregate
    - from_throwable(), from_async(): capture exceptions as failures
    - as_dict() / from_dict(): plain-dictionary form
"""

from __future__ import annotations

import logging

from resultwire.adapters import from_async, from_throwable
from resultwire.combinators import (
    and_then,
    async_and_then,
    async_map,
    async_match,
    combine_all,
    combine_all_errors,
    map,
    map_error,
    match,
    or_else,
    unsafe_unwrap,
    unwrap_or,
)
from resultwire.config import Config, get_config, reset_config, set_config
from resultwire.data import as_dict, from_dict
from resultwire.errors import (
    ConfigurationError,
    ResultWireError,
    ShapeError,
    UnwrapError,
)
from resultwire.result import (
    FAILURE_TAG,
    SUCCESS_TAG,
    Failure,
    Result,
    Success,
    failure,
    is_failure,
    is_success,
    success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultwire")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultwire").addHandler(logging.NullHandler())

__all__ = [
    "FAILURE_TAG",
    "SUCCESS_TAG",
    "Config",
    "ConfigurationError",
    "Failure",
    "Result",
    "ResultWireError",
    "ShapeError",
    "Success",
    "UnwrapError",
    "and_then",
    "as_dict",
    "async_and_then",
    "async_map",
    "async_match",
    "combine_all",
    "combine_all_errors",
    "failure",
    "from_async",
    "from_dict",
    "from_throwable",
    "get_config",
    "is_failure",
    "is_success",
    "map",
    "map_error",
    "match",
    "or_else",
    "reset_config",
    "set_config",
    "success",
    "unsafe_unwrap",
    "unwrap_or",
]
