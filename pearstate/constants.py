"""Shared constants for pearstate dot-directories, link schemes and storage layout."""

PEARSTATE_HOME_EXT = ".pearstate"  # user-level state directory suffix

PEARSTATE_HOME_DISPLAY = f"~/{PEARSTATE_HOME_EXT}"  # user-readable path hint

PEAR_PROTOCOL = "pear:"
FILE_PROTOCOL = "file:"

# z-base-32 alphabet used by hypercore ids
Z32_ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"
KEY_BYTES = 32
Z32_KEY_LENGTH = 52
HEX_KEY_LENGTH = 64

# Well-known application aliases (pear://keet, pear://runtime)
ALIASES = {
    "keet": "oeeoz3w6fjjt7bym3ndpa6hhicm8f8naxyk11z4iypeoupn6jzpo",
    "runtime": "nkw138nybdx6mtf98z497czxogzwje5yzu453c4ijq3qzsrz3m7o",
}

APP_STORAGE_DIR = "app-storage"
BY_DKEY = "by-dkey"
BY_RANDOM = "by-random"
BY_RANDOM_INDEX = "by-random.json"
TMP_STORAGE_PREFIX = "pearstate-"

PACKAGE_FILE = "package.json"

# Prefixes State always adds to its unrouted list
ALWAYS_UNROUTED = ("/node_modules/.bin/",)

# Keys surfaced by State.config_from
CONFIG_KEYS = (
    "env",
    "cwd",
    "dir",
    "flags",
    "link",
    "applink",
    "key",
    "alias",
    "route",
    "routes",
    "unrouted",
    "entrypoint",
    "routed",
    "query",
    "fragment",
    "storage",
    "pid",
    "runtime",
    "dev",
    "stage",
    "run",
    "name",
)

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
