"""
Pak faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for all user-facing issues
  (errors and warnings). Codes are grouped by domain to keep copy consistent
  and make logs/searches predictable.
- PakException / PakWarning: base types that carry message + options and
  know how to render themselves in a friendly, lowercased, and actionable way.
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).

UX goals
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).

Integration
- Library code raises faults with code/title/hint options already attached.
- The command line catches them and calls trigger(fault, shell=True, ...): in
  shell mode they are rendered via rich and the process exits, otherwise they
  are raised (errors) or emitted through the warnings module (warnings).
"""
import copy
import inspect
import sys
import warnings
from abc import ABC
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across pak (stable identifiers).

    grouping (by high-level domain)
    - resolution (1110x)
      • NO_MATCH, INVALID_INPUT
    - configuration (1120x)
      • MISSING_CONFIG, MALFORMED_CONFIG, INVALID_CONFIG
    - safety (1130x)
      • ROOT_USER
    - execution (1140x)
      • CHILD_PROCESS
    - warnings (12xxx)
      • AMBIGUOUS_COMMAND
    """
    # --- resolution errors (11xxx) ---
    NO_MATCH            = 11101
    INVALID_INPUT       = 11102

    # --- configuration errors (11xxx) ---
    MISSING_CONFIG      = 11201
    MALFORMED_CONFIG    = 11202
    INVALID_CONFIG      = 11203

    # --- safety errors (11xxx) ---
    ROOT_USER           = 11301

    # --- execution errors (11xxx) ---
    CHILD_PROCESS       = 11401

    # --- warnings (12xxx) ---
    AMBIGUOUS_COMMAND   = 12101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette, title_style):
    main = __import__("__main__")
    options = fault.options
    colorful = options.get("colorful", True)
    fancy = options.get("fancy", False)

    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), style)

    prog = text(getattr(main, "__prog__", "pak"), styler("prog-name"))
    code = options.get("code")

    header = Text.assemble(
        "[ ",
        prog,
        " — ",
        text(code.normalize() if code else "?", styler("code")),
        " | ",
        text(str(options.get("title", type(fault).__name__)).title(), styler(title_style)),
        " ]"
    )
    message = text(fault.message, styler(title_style.replace("title", "message")))
    parts = [message]
    if options.get("hint"):
        parts.append(Text.assemble(text(" → ", styler("hint-arrow")), text(options["hint"], styler("hint"))))

    if fancy:
        return Panel(Group(*parts), title=header, title_align="left")

    return Group(header, *parts)


class PakException(Exception):
    """
    base error for every fault pak raises.

    options
    - code: FaultCode, title: short label, hint: one actionable sentence.
    - shell/fancy/colorful: rendering switches consumed by trigger().
    - status: exit status used in shell mode (defaults to 1).
    - any other context (query, path, ...) is kept for callers and tests.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        }, "error-title")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(self.options.get("status", 1))

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class NoMatchError(PakException): ...
class InvalidInputError(PakException): ...
class ConfigurationError(PakException): ...
class RootUserError(PakException): ...
class ExecutionError(PakException): ...


class PakWarning(ABC, Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "warning-title": "bold #FFC2E0",  # softer pinky title for warnings

            # body
            "warning-message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        }, "warning-title")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class AmbiguousCommandWarning(PakWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace(fault, **options) before triggering.
    - in shell mode, rendering happens via rich console; otherwise, exceptions are raised.

    typical options
    - shell, fancy, colorful, status, and any context the reporter may want to keep.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "PakException",
    "NoMatchError",
    "InvalidInputError",
    "ConfigurationError",
    "RootUserError",
    "ExecutionError",
    "PakWarning",
    "AmbiguousCommandWarning",
    "FaultCode",
    "trigger",
)
