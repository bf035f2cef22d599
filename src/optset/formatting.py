from __future__ import annotations

from optset.config import DEFAULT_FORMAT_OPTIONS, FormatOptions
from optset.logging import get_logger
from optset.option import Option
from optset.option_set import OptionSet

__all__ = ["format_option", "format_options", "format_tokens"]

logger = get_logger("formatting")


def format_option(
    option: Option,
    use_acronym: bool,
    options: FormatOptions = DEFAULT_FORMAT_OPTIONS,
) -> str:
    if use_acronym:
        return f"{options.acronym_prefix}{option.acronym}"
    return f"{options.long_prefix}{option.long_name}"


def format_tokens(
    option_set: OptionSet,
    options: FormatOptions = DEFAULT_FORMAT_OPTIONS,
) -> list[str]:
    """Render each set option as an argument token.

    Options are visited in declaration order. With `group_acronyms`, options
    rendered by a single-character acronym are folded into one leading token
    (``-la``); longer acronyms keep a token of their own.
    """
    acronyms: list[str] = []
    tokens: list[str] = []
    for option in option_set:
        use_acronym = option_set.use_acronym_for(option)
        if use_acronym and options.group_acronyms and len(option.acronym) == 1:
            acronyms.append(option.acronym)
        else:
            tokens.append(format_option(option, use_acronym, options))

    if acronyms:
        tokens.insert(0, options.acronym_prefix + "".join(acronyms))

    logger.debug("Rendered %s as %s.", option_set, tokens)
    return tokens


def format_options(
    option_set: OptionSet,
    options: FormatOptions = DEFAULT_FORMAT_OPTIONS,
) -> str:
    return options.separator.join(format_tokens(option_set, options))
