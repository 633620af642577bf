"""Configuration, catalog and installed-extension data shared by the settings screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

BUNDLED_SOURCE_ID = "bundled"
GITHUB_SOURCE_ID = "github"


class Os(Enum):
    """Platforms an extension can target."""

    WINDOWS = "windows"
    MAC = "macos"
    LINUX = "linux"


class ExtensionKind(Enum):
    """How an extension provides its commands."""

    STATIC = "static"
    WASM_PLUGIN = "wasm_plugin"


class ThemeMode(Enum):
    """Appearance preference."""

    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


class CommandBehavior(Enum):
    """What selecting a command does."""

    EXECUTE = "execute"
    GUIDE = "guide"


class Key(Enum):
    """Keys that can end an activation shortcut; the value is the display text."""

    KEY_A = "A"
    KEY_B = "B"
    KEY_C = "C"
    KEY_D = "D"
    KEY_E = "E"
    KEY_F = "F"
    KEY_G = "G"
    KEY_H = "H"
    KEY_I = "I"
    KEY_J = "J"
    KEY_K = "K"
    KEY_L = "L"
    KEY_M = "M"
    KEY_N = "N"
    KEY_O = "O"
    KEY_P = "P"
    KEY_Q = "Q"
    KEY_R = "R"
    KEY_S = "S"
    KEY_T = "T"
    KEY_U = "U"
    KEY_V = "V"
    KEY_W = "W"
    KEY_X = "X"
    KEY_Y = "Y"
    KEY_Z = "Z"
    KEY_0 = "0"
    KEY_1 = "1"
    KEY_2 = "2"
    KEY_3 = "3"
    KEY_4 = "4"
    KEY_5 = "5"
    KEY_6 = "6"
    KEY_7 = "7"
    KEY_8 = "8"
    KEY_9 = "9"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    SEMICOLON = ";"
    EQUAL = "="
    COMMA = ","
    MINUS = "-"
    PERIOD = "."
    SLASH = "/"
    GRAVE = "`"
    LEFT_BRACKET = "["
    BACKSLASH = "\\"
    RIGHT_BRACKET = "]"
    APOSTROPHE = "'"
    ENTER = "Enter"
    SPACE = "Space"
    TAB = "Tab"
    ESCAPE = "Escape"
    DELETE = "Delete"
    BACKSPACE = "Backspace"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    INSERT = "Insert"
    LEFT_ARROW = "Left"
    RIGHT_ARROW = "Right"
    UP_ARROW = "Up"
    DOWN_ARROW = "Down"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HotkeyModifiers:
    """Modifier keys held together with the main key."""

    control: bool = False
    shift: bool = False
    alt: bool = False
    win: bool = False

    def names(self) -> list[str]:
        """Display names of the held modifiers, in canonical order."""
        flags = (
            (self.control, "Ctrl"),
            (self.shift, "Shift"),
            (self.alt, "Alt"),
            (self.win, "Win"),
        )
        return [name for held, name in flags if held]


@dataclass(frozen=True)
class KeyboardShortcut:
    """A single key chord such as Ctrl+Shift+P."""

    key: Key
    modifier: HotkeyModifiers = field(default_factory=HotkeyModifiers)

    def __str__(self) -> str:
        return "+".join([*self.modifier.names(), str(self.key)])


@dataclass
class GitHubExtensionSource:
    """Where the remote extension catalog is fetched from."""

    owner: str = ""
    repo: str = ""
    branch: str = "main"
    catalog_path: str = "catalog.json"
    enabled: bool = False


@dataclass
class AppearanceConfig:
    """Visual preferences."""

    theme: ThemeMode = ThemeMode.SYSTEM


def _default_shortcut() -> KeyboardShortcut:
    return RuntimeConfig.default_activation_shortcut()


@dataclass
class RuntimeConfig:
    """User settings that can be edited and saved."""

    activation: KeyboardShortcut = field(default_factory=_default_shortcut)
    command_behavior: CommandBehavior = CommandBehavior.EXECUTE
    appearance: AppearanceConfig = field(default_factory=AppearanceConfig)
    github: GitHubExtensionSource = field(default_factory=GitHubExtensionSource)

    @staticmethod
    def default_activation_shortcut() -> KeyboardShortcut:
        """The shortcut that opens the palette out of the box."""
        return KeyboardShortcut(
            key=Key.KEY_P,
            modifier=HotkeyModifiers(control=True, shift=True),
        )


@dataclass
class CatalogEntry:
    """One extension offered by a catalog."""

    id: str
    name: str
    version: str
    platform: Os
    kind: ExtensionKind
    package_url: str
    package_sha256: str
    size_bytes: int | None = None
    publisher: str | None = None
    description: str | None = None
    license: str | None = None
    homepage: str | None = None
    repository: str | None = None
    keywords: list[str] = field(default_factory=list)
    min_app_version: str | None = None


@dataclass
class ExtensionCatalog:
    """A fetched list of catalog entries."""

    entries: list[CatalogEntry] = field(default_factory=list)


@dataclass
class BundledExtension:
    """An extension shipped with the application."""

    id: str
    name: str
    version: str
    kind: ExtensionKind
    installed_path: Path
    enabled: bool = True


@dataclass
class InstalledExtension:
    """An extension recorded as present on this device."""

    id: str
    version: str
    platform: Os
    kind: ExtensionKind
    source_id: str
    package_sha256: str
    enabled: bool
    installed_path: Path


@dataclass
class InstalledState:
    """The record of installed extensions."""

    extensions: list[InstalledExtension] = field(default_factory=list)

    def enabled_for(self, extension_id: str, source_id: str) -> bool | None:
        """Enabled flag of the matching extension, or None if it is not recorded."""
        return next(
            (
                extension.enabled
                for extension in self.extensions
                if extension.id == extension_id and extension.source_id == source_id
            ),
            None,
        )


_OS_LABELS = {Os.WINDOWS: "Windows", Os.MAC: "macOS", Os.LINUX: "Linux"}
_KIND_BADGES = {ExtensionKind.STATIC: "Static", ExtensionKind.WASM_PLUGIN: "Plugin"}


def os_label(os: Os) -> str:
    """Human-readable platform name."""
    return _OS_LABELS[os]


def extension_kind_badge(kind: ExtensionKind) -> str:
    """Badge text for an extension kind."""
    return _KIND_BADGES[kind]


def extension_enabled_label(enabled: bool) -> str:
    """Status text for an extension's enabled flag."""
    return "Enabled" if enabled else "Disabled"