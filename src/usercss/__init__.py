"""usercss -- metadata extraction and validation for UserCSS stylesheets."""

__version__ = "0.1.0"

from usercss.config import UserCSSConfig  # noqa: E402
from usercss.errors import FetchError, FetchTimeoutError  # noqa: E402
from usercss.fetch import fetch_source, parse_from_url  # noqa: E402
from usercss.model import (  # noqa: E402
    Author,
    Diagnostic,
    DocumentRule,
    ErrorKind,
    RuleKind,
    Severity,
    UserCSS,
)
from usercss.parser import (  # noqa: E402
    EmptyInputError,
    NoDirectivesError,
    ParseError,
    parse_usercss,
)
from usercss.rewrite import rewrite_update_url, set_update_url  # noqa: E402
from usercss.validation import (  # noqa: E402
    ValidationError,
    is_valid,
    validate,
    validate_or_raise,
)

__all__ = [
    "__version__",
    # parsing
    "parse_usercss",
    "parse_from_url",
    "fetch_source",
    # model
    "UserCSS",
    "Author",
    "DocumentRule",
    "RuleKind",
    "Diagnostic",
    "ErrorKind",
    "Severity",
    # validation
    "validate",
    "validate_or_raise",
    "is_valid",
    # rewrite
    "set_update_url",
    "rewrite_update_url",
    # config
    "UserCSSConfig",
    # errors
    "ParseError",
    "EmptyInputError",
    "NoDirectivesError",
    "ValidationError",
    "FetchError",
    "FetchTimeoutError",
]
