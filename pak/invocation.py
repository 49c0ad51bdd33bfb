"""
Pak invocation building: turn a resolved command into a package-manager command line.

    build("install", ["pkg1", "pkg2"], "apt", True, "sudo")
    -> "sudo apt install pkg1 pkg2"

Trailing arguments are joined with single spaces and forwarded verbatim; they
are not shell-escaped, so "pak in 'a b'" reaches the shell as two words.
"""


def build(command, arguments, package_manager, use_root, root_command, /):
    """
    Build the command line handed to the shell.

    tokens, in order
    - root_command, only when use_root is true.
    - package_manager.
    - command.
    - the trailing arguments joined with spaces, only when there are any.
    """
    if isinstance(arguments, str):
        raise TypeError("build() arguments must be an iterable of strings, not a string")
    arguments = tuple(arguments)

    tokens = []
    if use_root:
        tokens.append(root_command)
    tokens.append(package_manager)
    tokens.append(command)
    if arguments:
        tokens.append(" ".join(arguments))

    return " ".join(tokens)


__all__ = (
    "build",
)
