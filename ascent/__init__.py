"""ascent - classical unconstrained maximization: Newton, golden section, steepest ascent."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_monotone,
    assert_valid_bracket,
    debug_context,
    is_debug_enabled,
    is_neg_def,
    is_valid_bracket,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Applications
from .models import (
    LogisticFit,
    add_intercept,
    fit_logistic,
    log_likelihood,
    log_ratio_bundle,
    quadratic_bundle,
)

# Solvers
from .optimize import (
    DEFAULT_ALPHA_MAX,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    GOLDEN_RATIO,
    Bracket,
    InvalidBracketError,
    IterationState,
    LineSearchResult,
    OptimizeResult,
    ScalarResult,
    Status,
    approx_grad,
    approx_hessian,
    ascent_then_newton,
    golden_section,
    golden_section_iterations,
    line_search,
    newton_1d,
    newton_multivariate,
    steepest_ascent,
)

__all__ = [
    "__version__",
    # Solvers
    "newton_1d",
    "golden_section",
    "golden_section_iterations",
    "line_search",
    "steepest_ascent",
    "newton_multivariate",
    "ascent_then_newton",
    "approx_grad",
    "approx_hessian",
    # Types
    "Status",
    "Bracket",
    "InvalidBracketError",
    "IterationState",
    "LineSearchResult",
    "OptimizeResult",
    "ScalarResult",
    "DEFAULT_TOL",
    "DEFAULT_MAXITER",
    "DEFAULT_ALPHA_MAX",
    "GOLDEN_RATIO",
    # Applications
    "LogisticFit",
    "add_intercept",
    "fit_logistic",
    "log_likelihood",
    "log_ratio_bundle",
    "quadratic_bundle",
    # Diagnostics
    "is_valid_bracket",
    "assert_valid_bracket",
    "assert_monotone",
    "is_neg_def",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
