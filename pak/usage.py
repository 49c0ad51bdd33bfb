"""
Pak help screen.

Renders the current configuration (package manager, root policy, commands,
shortcuts) plus usage and flags with rich. Colors come from a palette that the
host can override with a __styles__ mapping in __main__, the same way faults
are styled.
"""
from collections import defaultdict

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

FLAGS = (
    ("--help, -h", "Shows this help screen"),
    ("--root, -r", "Bypasses root user check"),
)


def render(config, /, *, colorful=True, fancy=False):
    """
    Build the help screen for a configuration as a rich renderable.

    Palette keys
    - title, label, value, overridden, usage, example
    - section, command, shortcut, mapping, flag, description, note
    """
    styles = defaultdict(str, {
        "title": "bold #FF4D94",  # MAGENTA-PINK → brand pop
        "label": "#A3A3A3",  # Neutral gray
        "value": "bold #36C5F0",  # SKY-BLUE
        "overridden": "italic #FFD600",  # AMBER
        "usage": "bold #00E6FF",  # CYAN
        "example": "#E5E7EB",

        "section": "bold #FFFFFF",  # Pure white headers
        "command": "bold #22C55E",  # GREEN for commands
        "shortcut": "bold #00E6FF",  # CYAN for shortcuts
        "mapping": "#22C55E",
        "flag": "bold #FFD600",  # AMBER for flags
        "description": "#9CA3AF",  # Muted gray
        "note": "italic #737373",  # Dim footer gray
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        return Text(str(fragment), styler(style))

    renders = [text("Arsen Musayelyan's Package Manager Wrapper", "title")]

    manager = Text.assemble(text("Current package manager is: ", "label"), text(config.package_manager, "value"))
    if config.overridden:
        manager.append_text(text(" (overridden)", "overridden"))
    renders.append(manager)

    if config.use_root:
        renders.append(Text.assemble(text("Using root with command: ", "label"), text(config.root_command, "value")))
    else:
        renders.append(text("Not using root", "label"))

    renders.append(Text())
    renders.append(Text.assemble(text("Usage: ", "usage"), text("pak <command> [package]", "example")))
    renders.append(Text.assemble(text("Example: ", "usage"), text("pak in hello", "example")))

    renders.append(Text())
    renders.append(text("The available commands are:", "section"))
    for command in config.commands:
        renders.append(Text.assemble("  ", text(command, "command")))

    renders.append(Text())
    renders.append(text("The available shortcuts are:", "section"))
    for shortcut, mapping in config.shortcuts:
        renders.append(Text.assemble("  ", text(shortcut + ":", "shortcut"), " ", text(mapping, "mapping")))

    renders.append(Text())
    renders.append(text("The available flags are:", "section"))
    for flag, description in FLAGS:
        renders.append(Text.assemble("  ", text(flag + ":", "flag"), " ", text(description, "description")))

    renders.append(Text())
    renders.append(text(
        "Pak uses a string distance algorithm, so `pak in` is valid as is `pak inst` or `pak install`",
        "note",
    ))

    if fancy:
        return Panel(Group(*renders), title=text("pak", "title"), title_align="left")
    return Group(*renders)


def show(config, /, *, console=Unset, colorful=True, fancy=False):
    """Print the help screen (stdout unless another console is given)."""
    if console is Unset:
        console = Console()
    console.print(render(config, colorful=colorful, fancy=fancy))


__all__ = (
    "render",
    "show",
)
