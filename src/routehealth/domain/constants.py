from __future__ import annotations

"""
Domain Constants and Declarative Rule Tables.

Centralizes every hard-coded list used by the scanning subsystem: directory
deny-lists, file extension stacks, keyword sets for depth gating, the known
project detection table, and the category/glyph vocabularies consumed by
downstream renderers. Keeping them here makes each rule table independently
testable.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

APP_NAME = "RouteHealth"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# TRAVERSAL LIMITS
# -----------------------------------------------------------------------------

HIDDEN_MARKER = "."
SHALLOW_DEPTH = 5
MAX_DEPTH = 12
CATEGORY_DISPLAY_CAP = 100

# -----------------------------------------------------------------------------
# DIRECTORY RULES
# -----------------------------------------------------------------------------

ALLOWED_HIDDEN_DIRS: FrozenSet[str] = frozenset({
    ".vscode-extensions", ".vscode", ".github", ".config", ".husky",
})

SKIP_DIRECTORIES: FrozenSet[str] = frozenset({
    # Dependency caches and virtual environments
    "node_modules", "bower_components", "jspm_packages", "vendor",
    "venv", ".venv", "env", "__pycache__", ".pytest_cache", ".mypy_cache",
    # Build output
    "dist", "build", "out", ".next", ".nuxt", ".turbo", ".output", "coverage",
    "target", "bin", "obj",
    # Version control metadata
    ".git", ".svn", ".hg",
    # Logs, backups, generated reports
    "logs", "log", "backup", "backups", "reports", "report", "exports", "export",
    "cache", ".cache", "tmp", "temp",
})

IMPORTANT_DIR_KEYWORDS: FrozenSet[str] = frozenset({
    "src", "source", "lib", "app", "core", "brain", "handlers", "handler",
    "components", "component", "modules", "module", "hooks", "pages", "api",
    "utils", "shared", "services", "types", "store", "scripts", "config",
})

DEEP_EXCLUDED_DIR_KEYWORDS: FrozenSet[str] = frozenset({
    "test", "tests", "__tests__", "spec", "specs", "e2e", "docs", "doc",
    "documentation", "example", "examples", "fixtures", "mocks", "__mocks__",
    "stories", "storybook",
})

# -----------------------------------------------------------------------------
# FILE RULES
# -----------------------------------------------------------------------------

EXCLUDED_FILE_EXTENSIONS: FrozenSet[str] = frozenset({
    # Styling and markup
    ".css", ".scss", ".sass", ".less", ".styl", ".html", ".htm",
    # Media and fonts
    ".svg", ".png", ".jpg", ".jpeg", ".gif", ".ico", ".webp", ".bmp",
    ".mp3", ".wav", ".ogg", ".flac", ".mp4", ".webm", ".mov",
    ".woff", ".woff2", ".ttf", ".eot", ".otf",
    # Generated artifacts
    ".map", ".lock", ".log", ".pyc", ".zip", ".tar", ".gz",
})

EXCLUDED_NAME_FRAGMENTS: Tuple[str, ...] = (
    ".min.", ".bundle.", ".chunk.", ".test.", ".spec.", ".stories.",
    "-lock.", ".d.ts.map",
)

EXCLUDED_FILE_NAMES: FrozenSet[str] = frozenset({
    "package-lock.json", "yarn.lock", "pnpm-lock.yaml", "poetry.lock",
    "composer.lock", "cargo.lock",
})

CONFIG_JSON_KEYWORDS: Tuple[str, ...] = (
    "package", "tsconfig", "jsconfig", "config", "settings", "manifest",
    "babel", "eslint", "prettier", "vercel", "composer", "launch", "tasks",
)

SOURCE_CODE_EXTENSIONS: FrozenSet[str] = frozenset({
    ".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs", ".vue", ".svelte",
    ".py", ".java", ".kt", ".go", ".rs", ".rb", ".php", ".cs",
    ".c", ".cpp", ".h", ".hpp", ".swift", ".dart", ".sh",
})

CONFIG_DATA_EXTENSIONS: FrozenSet[str] = frozenset({
    ".json", ".yaml", ".yml", ".toml", ".ini", ".cfg", ".conf", ".env",
})

DOCUMENTATION_EXTENSIONS: FrozenSet[str] = frozenset({
    ".md", ".mdx", ".rst", ".txt",
})

IMPORTANT_PATH_FRAGMENTS: Tuple[str, ...] = (
    "brain/", "handlers/", "shared/", "scripts/",
)

# -----------------------------------------------------------------------------
# RECORD KIND DETECTION
# -----------------------------------------------------------------------------

MUSIC_KEYWORDS: Tuple[str, ...] = (
    "guitar", "vocal", "music", "audio", "sound", "chord", "melody",
    "harmony", "tuner", "metronome", "jam", "practice", "theory", "tabs",
    "stage",
)

# Ordered: first matching keyword segment decides the kind.
PATH_KIND_KEYWORDS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("guitar",), "guitar"),
    (("vocal", "vocals"), "vocal"),
    (("music", "audio", "sound"), "music"),
    (("brain",), "brain"),
    (("handlers", "handler"), "handler"),
    (("components", "component"), "component"),
    (("hooks", "hook"), "hook"),
    (("pages", "page", "app"), "page"),
    (("api", "apis"), "api"),
    (("utils", "util", "utilities"), "util"),
    (("types", "type", "@types"), "type"),
    (("config", "configs", "configuration"), "config"),
)

# -----------------------------------------------------------------------------
# CLASSIFICATION VOCABULARY
# -----------------------------------------------------------------------------

STATUS_WORKING = "working"
STATUS_WARNING = "warning"
STATUS_ERROR = "error"

STATUS_GLYPHS: Dict[str, str] = {
    STATUS_WORKING: "✅",
    STATUS_WARNING: "⚠️",
    STATUS_ERROR: "❌",
}

HEALTHY_THRESHOLD = 80
WARNING_THRESHOLD = 60

# -----------------------------------------------------------------------------
# TREE VOCABULARY
# -----------------------------------------------------------------------------

MODE_FOLDER_PATHS = "folderPaths"
MODE_CATEGORY = "category"
TREE_MODES: Tuple[str, ...] = (MODE_FOLDER_PATHS, MODE_CATEGORY)

ROOT_NAME = "Ecosystem"

CATEGORY_LABELS: Tuple[str, ...] = (
    "Brain: Music",
    "Brain: Learning",
    "Brain: Analysis",
    "Brain: Core",
    "Brain: General",
    "UI: Guitar Components",
    "UI: Vocal Components",
    "UI: Components",
    "Hooks",
    "Pages",
    "Modules",
    "Modules: Utilities",
    "Modules: Types",
    "Modules: Core",
    "Handlers",
    "Scripts",
    "Shared",
    "Config Files",
    "Documentation",
    "Empty Folders",
    "Other Files",
)

# -----------------------------------------------------------------------------
# PROJECT DETECTION TABLE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectDefinition:
    """
    Declarative entry of the known-project detection table.

    Attributes:
        display_name: Label used for the project node.
        candidate_paths: Relative paths tried (workspace root, then parent).
        boundary_exclusions: Root-level children owned by other projects.
    """
    display_name: str
    candidate_paths: Tuple[str, ...]
    boundary_exclusions: Tuple[str, ...] = ()


DEFAULT_PROJECTS: Tuple[ProjectDefinition, ...] = (
    ProjectDefinition(
        display_name="Cipher Engine",
        candidate_paths=("cipher-engine-clean-v2", "maestro-ai/cipher-engine-clean-v2"),
    ),
    ProjectDefinition(
        display_name="Maestro AI",
        candidate_paths=("maestro-ai",),
        boundary_exclusions=(
            "cipher-engine-clean-v2", "ava", "maestro-modules", "maestro-brain",
        ),
    ),
    ProjectDefinition(
        display_name="Ava",
        candidate_paths=("ava", "maestro-ai/ava"),
    ),
    ProjectDefinition(
        display_name="Maestro Modules",
        candidate_paths=("maestro-modules", "maestro-ai/maestro-modules"),
    ),
    ProjectDefinition(
        display_name="Maestro Brain",
        candidate_paths=("maestro-brain", "maestro-ai/maestro-brain"),
    ),
)
