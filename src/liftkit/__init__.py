"""liftkit: combinators for Ok/Err results.

Lift plain (possibly raising) computations into Results, chain them, and
collect many Results into one, stopping at the first failure.

Flat imports (preferred):
    from liftkit import Ok, Err, Result, lift, unlift, do, sequence

Submodule imports (for organization):
    from liftkit.result import Ok, Err, fmap, to_bool
    from liftkit.boundary import lift, unlift
    from liftkit.collect import sequence, map, reduce, liftm
"""

# Configuration
from liftkit._config import LiftConfig, get_config, init, reset_config

# Logging
from liftkit._logging import configure_logging, get_logger

# Lift boundary
from liftkit.boundary import is_thunk, lift, normalize, thunk, unlift

# Chaining
from liftkit.chain import Step, do, ignore_prev, use_prev

# Aggregation
from liftkit.collect import liftm, liftn, map, reduce, sequence  # noqa: A004

# Decorators
from liftkit.decorators import lifted, unlifted

# Errors
from liftkit.errors import ArityError, LiftedException, PreconditionError

# Propagation
from liftkit.propagate import Propagate

# Result types
from liftkit.result import (
    Err,
    Failure,
    FailureType,
    Ok,
    Result,
    fmap,
    is_err,
    is_ok,
    to_bool,
)

__all__ = [
    # Errors
    'ArityError',
    # Result types
    'Err',
    'Failure',
    'FailureType',
    # Configuration
    'LiftConfig',
    'LiftedException',
    'Ok',
    'PreconditionError',
    # Propagation
    'Propagate',
    'Result',
    # Chaining
    'Step',
    'configure_logging',
    'do',
    'fmap',
    'get_config',
    # Logging
    'get_logger',
    'ignore_prev',
    'init',
    'is_err',
    'is_ok',
    'is_thunk',
    # Lift boundary
    'lift',
    # Decorators
    'lifted',
    # Aggregation
    'liftm',
    'liftn',
    'map',
    'normalize',
    'reduce',
    'reset_config',
    'sequence',
    'thunk',
    'to_bool',
    'unlift',
    'unlifted',
    'use_prev',
]
