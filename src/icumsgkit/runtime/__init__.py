"""Runtime: evaluation, category rules, value coercion and formatters.

Python 3.13+.
"""

from .evaluator import (
    MessageEvaluator,
    build_plural,
    build_select,
    format_message,
    format_positional,
)
from .functions import (
    Formatter,
    FormatterRegistry,
    create_default_formatters,
    date_format,
    get_shared_formatters,
    number_format,
    time_format,
)
from .plural_rules import (
    ordinal_category,
    ordinal_form,
    plural_category,
    plural_form,
    select_branch,
)
from .value_types import (
    MessageArgs,
    MessageArgument,
    Numeric,
    coerce_number,
    format_numeral,
    format_value,
)

__all__ = [
    "Formatter",
    "FormatterRegistry",
    "MessageArgs",
    "MessageArgument",
    "MessageEvaluator",
    "Numeric",
    "build_plural",
    "build_select",
    "coerce_number",
    "create_default_formatters",
    "date_format",
    "format_message",
    "format_numeral",
    "format_positional",
    "format_value",
    "get_shared_formatters",
    "number_format",
    "ordinal_category",
    "ordinal_form",
    "plural_category",
    "plural_form",
    "select_branch",
    "time_format",
]
