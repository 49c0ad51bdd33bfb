"""
Pak process execution: run a built command line through the shell.

The child shares pak's stdin, stdout and stderr, so package-manager prompts and
progress output reach the user untouched. The exit status is returned to the
caller, which decides what a non-zero status means.
"""
import subprocess

from .faults import FaultCode, ExecutionError

SHELL = ("sh", "-c")


def execute(line, /):
    """
    Run line with `sh -c` and wait for it.

    returns
    - the child's exit status (negative when killed by a signal).

    raises
    - ExecutionError: the shell could not be started.
    """
    if not isinstance(line, str):
        raise TypeError("execute() argument must be a string")
    try:
        process = subprocess.run([*SHELL, line])
    except OSError as error:
        raise ExecutionError(
            "unable to start %r: %s" % (SHELL[0], error),
            title="cannot start shell",
            code=FaultCode.CHILD_PROCESS,
            hint="make sure a POSIX shell is available as %r" % SHELL[0],
            line=line,
        ) from error
    return process.returncode


__all__ = (
    "SHELL",
    "execute",
)
