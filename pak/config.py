"""
Pak configuration: where the configuration lives and how it is read.

File format (TOML)

    packageManager = "apt"
    commands = ["install", "remove", "update", "upgrade", "search", "download"]
    useRoot = true
    rootCommand = "sudo"
    shortcuts = ["rm", "inst"]
    shortcutMappings = ["remove", "install"]

Location
- /etc/pak.cfg by default.
- /etc/pak.d/<name>.cfg when PAK_MGR_OVERRIDE=<name> is set; the resulting
  configuration is flagged as overridden so the status line and help can say so.

Every problem is reported as a ConfigurationError whose code tells a missing
file (MISSING_CONFIG), a TOML syntax error (MALFORMED_CONFIG) and a missing or
mistyped key (INVALID_CONFIG) apart.
"""
import os
import os.path
import tomllib

from .faults import FaultCode, ConfigurationError
from .resolver import Vocabulary, ShortcutTable
from .utils import Unset, ValueType, coalesce

DEFAULT_PATH = "/etc/pak.cfg"
OVERRIDE_DIRECTORY = "/etc/pak.d"
OVERRIDE_VARIABLE = "PAK_MGR_OVERRIDE"

# key in the file -> expected type
KEYS = {
    "packageManager": str,
    "commands": list,
    "useRoot": bool,
    "rootCommand": str,
    "shortcuts": list,
    "shortcutMappings": list,
}


class Config(metaclass=ValueType):
    """
    Read-only view of one configuration file.
    """
    __introspectable__ = (
        "package_manager",
        "commands",
        "use_root",
        "root_command",
        "shortcuts",
        "source",
        "overridden",
    )

    def __init__(
            self,
            package_manager,
            commands,
            use_root,
            root_command,
            shortcuts=Unset,
            /,
            *,
            source=None,
            overridden=False,
    ):
        self._package_manager = package_manager
        self._commands = commands if isinstance(commands, Vocabulary) else Vocabulary(commands)
        self._use_root = use_root
        self._root_command = root_command
        self._shortcuts = coalesce(shortcuts, ShortcutTable())
        self._source = source
        self._overridden = overridden


def locate(environ=Unset, /):
    """
    Return (path, overridden) for the configuration to use.

    environ defaults to os.environ; an empty PAK_MGR_OVERRIDE counts as unset.
    """
    environ = coalesce(environ, os.environ)
    if override := environ.get(OVERRIDE_VARIABLE, ""):
        return os.path.join(OVERRIDE_DIRECTORY, override + ".cfg"), True
    return DEFAULT_PATH, False


def _invalid(message, source, hint):
    return ConfigurationError(
        "%s in %s" % (message, source),
        title="invalid configuration",
        code=FaultCode.INVALID_CONFIG,
        hint=hint,
        path=source,
    )


def parse(text, /, *, source="<string>", overridden=False):
    """
    Parse configuration text into a Config.

    raises
    - ConfigurationError (MALFORMED_CONFIG): text is not valid TOML.
    - ConfigurationError (INVALID_CONFIG): a key is missing, has the wrong type,
      a list holds something other than strings, or the shortcut lists differ in length.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as error:
        raise ConfigurationError(
            "unable to parse %s: %s" % (source, error),
            title="malformed configuration",
            code=FaultCode.MALFORMED_CONFIG,
            hint="fix the TOML syntax of the configuration file",
            path=source,
        ) from error

    for key, expected in KEYS.items():
        try:
            value = data[key]
        except KeyError:
            raise _invalid("missing key %r" % key, source, "add %r to the configuration file" % key) from None
        if not isinstance(value, expected):
            raise _invalid(
                "key %r must be a %s" % (key, "list of strings" if expected is list else expected.__name__),
                source,
                "correct the value of %r" % key,
            )
        if expected is list and not all(isinstance(item, str) for item in value):
            raise _invalid("key %r must only contain strings" % key, source, "quote every entry of %r" % key)

    if len(data["shortcuts"]) != len(data["shortcutMappings"]):
        raise _invalid(
            "%d shortcuts but %d shortcut mappings" % (len(data["shortcuts"]), len(data["shortcutMappings"])),
            source,
            "give every entry of 'shortcuts' exactly one entry in 'shortcutMappings'",
        )

    return Config(
        data["packageManager"],
        Vocabulary(data["commands"]),
        data["useRoot"],
        data["rootCommand"],
        ShortcutTable(data["shortcuts"], data["shortcutMappings"]),
        source=source,
        overridden=overridden,
    )


def load(path=Unset, /, *, environ=Unset):
    """
    Read and parse the configuration file.

    When path is not given it is found with locate(environ); an explicit path is
    never considered overridden.
    """
    if path is Unset:
        path, overridden = locate(environ)
    else:
        overridden = False

    try:
        with open(path, encoding="utf-8") as file:
            text = file.read()
    except FileNotFoundError:
        raise ConfigurationError(
            "configuration file %s does not exist" % path,
            title="missing configuration",
            code=FaultCode.MISSING_CONFIG,
            hint="create it, or point %s at a file in %s" % (OVERRIDE_VARIABLE, OVERRIDE_DIRECTORY),
            path=path,
        ) from None
    except (OSError, UnicodeDecodeError) as error:
        raise ConfigurationError(
            "unable to read %s: %s" % (path, error),
            title="unreadable configuration",
            code=FaultCode.MISSING_CONFIG,
            hint="check the permissions and encoding of the configuration file",
            path=path,
        ) from error

    return parse(text, source=path, overridden=overridden)


__all__ = (
    "DEFAULT_PATH",
    "OVERRIDE_DIRECTORY",
    "OVERRIDE_VARIABLE",
    "Config",
    "locate",
    "parse",
    "load",
)
