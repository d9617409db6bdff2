"""Command-line argument quoting.

Two decoders, two encoders. ``windows_escape_arg`` targets the argv splitter
used by programs started through CreateProcessW, where backslashes are only
special in front of a quote. ``bash_escape_arg`` targets a POSIX-shell style
command string where every backslash is an escape.
"""

from typing import Final

QUOTE: Final[str] = '"'
BACKSLASH: Final[str] = "\\"
EMPTY_ARG: Final[str] = '""'


def bash_escape_arg(argument: str) -> str:
    """Escape an argument for a shell-style command string.

    Args:
        argument: Unescaped argument

    Returns:
        Escaped argument, wrapped in double quotes when it contains a space
    """
    if not argument:
        return EMPTY_ARG

    has_space = " " in argument
    body = argument.replace(BACKSLASH, BACKSLASH * 2).replace(QUOTE, BACKSLASH + QUOTE)

    if has_space:
        return f"{QUOTE}{body}{QUOTE}"
    return body


def windows_escape_arg(argument: str) -> str:
    """Escape an argument for a CreateProcessW command line.

    Follows the MSVCRT argv rules: a run of backslashes is literal unless it
    is followed by a quote (or by the closing quote we add), in which case
    every backslash in the run has to be doubled.

    Args:
        argument: Unescaped argument

    Returns:
        Token that the native argv parser decodes back to ``argument``
    """
    if not argument:
        return EMPTY_ARG
    if " " not in argument and QUOTE not in argument:
        return argument

    parts = [QUOTE]
    length = len(argument)
    start = 0  # start of the pending literal segment, -1 when none
    i = 0
    while i < length:
        c = argument[i]
        if c != QUOTE and c != BACKSLASH:
            if start < 0:
                start = i
            i += 1
            continue

        # Flush the literal segment before the special character
        if start >= 0:
            parts.append(argument[start:i])
            start = -1

        if c == QUOTE:
            parts.append(BACKSLASH + QUOTE)
            i += 1
            continue

        run_end = i
        while run_end < length and argument[run_end] == BACKSLASH:
            run_end += 1
        run_len = run_end - i

        if run_end == length:
            # Run touches our closing quote
            parts.append(BACKSLASH * (run_len * 2))
        elif argument[run_end] == QUOTE:
            parts.append(BACKSLASH * (run_len * 2))
            parts.append(BACKSLASH + QUOTE)
            run_end += 1
        else:
            parts.append(BACKSLASH * run_len)
        i = run_end

    if start >= 0:
        parts.append(argument[start:])
    parts.append(QUOTE)
    return "".join(parts)


def build_command_line(arguments: list[str], style: str = "windows") -> str:
    """Escape each argument and join them into one command line.

    Args:
        arguments: Unescaped arguments, program first
        style: "windows" or "bash"

    Returns:
        Space-separated command line

    Raises:
        ValueError: If style is unknown
    """
    if style == "windows":
        escape = windows_escape_arg
    elif style == "bash":
        escape = bash_escape_arg
    else:
        raise ValueError(f"Unknown quoting style: {style!r}")
    return " ".join(escape(arg) for arg in arguments)
