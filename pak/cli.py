"""
Pak command line: `pak <command> [package...]`.

Flow
1. read -h/--help and -r/--root (everything else is left alone).
2. refuse to run as root unless -r/--root was given; pak invokes root itself
   when the configuration asks for it.
3. load the configuration (/etc/pak.cfg or the PAK_MGR_OVERRIDE one).
4. strip flags; with nothing left, --help, or a literal "help", show the help screen.
5. resolve the first token, warn when it matched more than one command, print
   the status line, build the package-manager command line and run it.

Faults raised along the way are rendered with rich on stderr and end the
process with status 1 (or the child's status for a failed package manager).
"""
import argparse
import os
import pwd
import sys

from rich.console import Console
from rich.text import Text

from . import config as configuration
from .arguments import normalize
from .executor import execute
from .faults import *
from .invocation import build
from .resolver import resolve
from .usage import show
from .utils import Unset

console = Console()


class ArgumentParser(argparse.ArgumentParser):
    """Flag parser whose errors are pak faults instead of a usage line and exit status 2."""

    def error(self, message):
        raise InvalidInputError(
            message,
            title="invalid flag",
            code=FaultCode.INVALID_INPUT,
            hint="pass -h/--help and -r/--root on their own, without values",
        )


parser = ArgumentParser(prog="pak", add_help=False, allow_abbrev=False)
parser.add_argument("-h", "--help", action="store_true", dest="help")
parser.add_argument("-r", "--root", action="store_true", dest="root")


def isroot(user=Unset, /):
    """
    Tell whether pak runs as root (any user name containing "root").

    user defaults to the name of the effective uid; USER and LOGNAME are ignored
    since they survive `su` without a login shell.
    """
    if user is Unset:
        user = pwd.getpwuid(os.geteuid()).pw_name
    return "root" in user


def status(resolution, config, /):
    """Return the "Running: Install using Apt" line shown before execution."""
    line = Text.assemble(
        "Running: ",
        (resolution.chosen.title(), "bold"),
        " using ",
        (config.package_manager.title(), "bold"),
    )
    if config.overridden:
        line.append(" (overridden)", "italic")
    return line


def run(argv, /, *, environ=Unset):
    """
    Run pak for an argument list and return the exit status.

    Faults are raised, not rendered; main() takes care of that.
    """
    flags, _ = parser.parse_known_args(argv)

    if not flags.root and isroot():
        raise RootUserError(
            "do not run as root, this program will invoke root for you if selected in config",
            title="running as root",
            code=FaultCode.ROOT_USER,
            hint="if you would like to bypass this, run this command with -r or --root",
        )

    config = configuration.load(environ=environ)
    arguments = normalize(argv)

    if not arguments or flags.help or "help" in arguments:
        show(config, console=console)
        return 0

    query, *trailing = arguments
    resolution = resolve(query, config.commands, config.shortcuts)

    if resolution.ambiguous:
        trigger(AmbiguousCommandWarning(
            "%r matches %s equally well" % (query, ", ".join(map(repr, resolution))),
            title="ambiguous command",
            code=FaultCode.AMBIGUOUS_COMMAND,
            hint="running %r; type more of the command to pick another one" % resolution.chosen,
            query=query,
            candidates=resolution.candidates,
        ), shell=True)

    console.print(status(resolution, config), highlight=False)

    line = build(resolution.chosen, trailing, config.package_manager, config.use_root, config.root_command)
    if returncode := execute(line):
        raise ExecutionError(
            "error received from child process (exit status %d)" % returncode,
            title="package manager failed",
            code=FaultCode.CHILD_PROCESS,
            hint="see the output of %r above" % config.package_manager,
            line=line,
            status=returncode if returncode > 0 else 1,
        )
    return 0


def main(argv=None, /):
    """Console entry point; argv defaults to sys.argv[1:]."""
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        return run(argv)
    except PakException as fault:
        trigger(fault, shell=True)


__all__ = (
    "isroot",
    "status",
    "run",
    "main",
)
