from .config import DEFAULT_FORMAT_OPTIONS, FormatOptions
from .display import option_table, print_option_set
from .formatting import format_option, format_options, format_tokens
from .logging import configure_logger, get_logger, reset_logger, set_module_level
from .option import Option
from .option_set import DefaultOptionSet, OptionSet
from .version import __version__

__all__ = [
    "Option",
    "OptionSet",
    "DefaultOptionSet",
    "FormatOptions",
    "DEFAULT_FORMAT_OPTIONS",
    "format_option",
    "format_options",
    "format_tokens",
    "option_table",
    "print_option_set",
    "configure_logger",
    "get_logger",
    "reset_logger",
    "set_module_level",
    "__version__",
]
