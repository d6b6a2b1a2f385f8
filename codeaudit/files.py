"""Filename classification deciding which scanners look at which files."""

import re

from codeaudit.models import FindingType

CODE_EXTENSIONS = frozenset({
    "ts", "tsx", "js", "jsx", "mjs", "cjs",
    "py", "rb", "go", "rs", "java", "kt",
    "c", "cpp", "h", "hpp", "cs", "swift",
    "php", "vue", "svelte",
})

TEXT_EXTENSIONS = frozenset({"md", "txt", "json", "yaml", "yml", "toml", "cfg", "ini"})

LICENSE_NAMES = (
    "LICENSE", "COPYING", "NOTICE", "README",
    "package.json", "Cargo.toml", "go.mod",
    "requirements.txt", "Gemfile", "pom.xml",
)

PII_SKIP_PATTERNS = [
    re.compile(r"\.min\.js$"),
    re.compile(r"\.bundle\.js$"),
    re.compile(r"node_modules/"),
    re.compile(r"vendor/"),
    re.compile(r"\.lock$"),
    re.compile(r"package-lock\.json$"),
    re.compile(r"yarn\.lock$"),
    re.compile(r"\.(?:svg|png|jpe?g|gif|ico|webp|bmp)$", re.IGNORECASE),
    re.compile(r"\.(?:woff2?|ttf|eot|otf)$", re.IGNORECASE),
]

TEST_PATH_PATTERNS = [
    re.compile(r"\.(?:test|spec|mock|fixture|example)\.", re.IGNORECASE),
    re.compile(r"__(?:tests?|mocks?|fixtures?)__", re.IGNORECASE),
]

GENERATED_PATTERNS = [
    re.compile(r"\.min\.[jc]ss?$"),
    re.compile(r"\.bundle\.js$"),
    re.compile(r"\.generated\."),
    re.compile(r"(?:^|/)dist/"),
    re.compile(r"(?:^|/)build/"),
    re.compile(r"(?:^|/)node_modules/"),
    re.compile(r"(?:^|/)vendor/"),
    re.compile(r"(?:package-lock\.json|yarn\.lock|pnpm-lock\.yaml)$"),
    re.compile(r"(?:Gemfile|poetry|Cargo)\.lock$"),
    re.compile(r"go\.sum$"),
]


def file_extension(filename: str) -> str:
    """Lower-cased text after the final '.', or '' when there is none."""
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def basename(filename: str) -> str:
    return filename.rsplit("/", 1)[-1]


def is_code_file(filename: str) -> bool:
    return file_extension(filename) in CODE_EXTENSIONS


def is_license_relevant(filename: str) -> bool:
    if is_code_file(filename) or file_extension(filename) in TEXT_EXTENSIONS:
        return True
    name = basename(filename).upper()
    return any(candidate.upper() in name for candidate in LICENSE_NAMES)


def should_skip_pii(filename: str) -> bool:
    return any(p.search(filename) for p in PII_SKIP_PATTERNS)


def is_test_file(filename: str) -> bool:
    return any(p.search(filename) for p in TEST_PATH_PATTERNS)


def is_generated_file(filename: str) -> bool:
    return any(p.search(filename) for p in GENERATED_PATTERNS)


def is_in_scope(category: FindingType, filename: str) -> bool:
    if category in (FindingType.SECURITY, FindingType.AI_PATTERN):
        return is_code_file(filename)
    if category is FindingType.LICENSE:
        return is_license_relevant(filename)
    return not should_skip_pii(filename)
