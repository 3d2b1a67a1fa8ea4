from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple


EXTENSION_LANGUAGE: Mapping[str, str] = MappingProxyType({
	# Programming languages
	".go": "Go",
	".py": "Python",
	".js": "JavaScript",
	".ts": "TypeScript",
	".jsx": "JavaScript",
	".tsx": "TypeScript",
	".java": "Java",
	".c": "C",
	".cpp": "C++",
	".cc": "C++",
	".cxx": "C++",
	".h": "C/C++ Header",
	".hpp": "C++ Header",
	".cs": "C#",
	".rb": "Ruby",
	".php": "PHP",
	".swift": "Swift",
	".kt": "Kotlin",
	".rs": "Rust",
	".scala": "Scala",
	".r": "R",
	".m": "Objective-C",
	".dart": "Dart",
	".lua": "Lua",
	".pl": "Perl",
	".sh": "Shell",
	".bash": "Shell",
	".zsh": "Shell",
	".fish": "Shell",
	".sql": "SQL",
	# Web
	".html": "HTML",
	".htm": "HTML",
	".css": "CSS",
	".scss": "SCSS",
	".sass": "Sass",
	".less": "Less",
	".vue": "Vue",
	".svelte": "Svelte",
	# Data and config
	".json": "JSON",
	".yaml": "YAML",
	".yml": "YAML",
	".xml": "XML",
	".toml": "TOML",
	".ini": "INI",
	".env": "Environment",
	".conf": "Config",
	".cfg": "Config",
	# Documentation
	".md": "Markdown",
	".rst": "reStructuredText",
	".txt": "Text",
	".tex": "LaTeX",
	".adoc": "AsciiDoc",
	# Build and package
	".gradle": "Gradle",
	".maven": "Maven",
	".dockerfile": "Dockerfile",
	".mk": "Makefile",
	# Others
	".proto": "Protocol Buffers",
	".graphql": "GraphQL",
	".gql": "GraphQL",
})

# Well-known file names win over their (generic) extension.
SPECIAL_FILES: Mapping[str, str] = MappingProxyType({
	"Dockerfile": "Dockerfile",
	"Makefile": "Makefile",
	"Rakefile": "Ruby",
	"Gemfile": "Ruby",
	"Podfile": "Ruby",
	"CMakeLists.txt": "CMake",
	"package.json": "JSON",
	"tsconfig.json": "JSON",
	"webpack.config.js": "JavaScript",
	"rollup.config.js": "JavaScript",
	"vite.config.js": "JavaScript",
	"vue.config.js": "JavaScript",
	".gitignore": "Config",
	".dockerignore": "Config",
	".eslintrc": "JSON",
	".prettierrc": "JSON",
	"requirements.txt": "Text",
	"go.mod": "Go Module",
	"go.sum": "Go Module",
	"Cargo.toml": "TOML",
	"Cargo.lock": "TOML",
	"pyproject.toml": "TOML",
	"Pipfile": "TOML",
	"pom.xml": "XML",
	"build.gradle": "Gradle",
})

TEXT_EXTENSIONS: FrozenSet[str] = frozenset({
	".go", ".py", ".js", ".ts", ".jsx", ".tsx", ".java", ".c",
	".cpp", ".cc", ".cxx", ".h", ".hpp", ".cs", ".rb", ".php",
	".swift", ".kt", ".rs", ".scala", ".r", ".m", ".dart", ".lua",
	".pl", ".sh", ".bash", ".zsh", ".fish", ".sql", ".html", ".htm",
	".css", ".scss", ".sass", ".less", ".vue", ".svelte", ".json", ".yaml",
	".yml", ".xml", ".toml", ".ini", ".md", ".rst", ".txt", ".tex",
	".proto", ".graphql", ".gql",
})

_HASH = ("#",)
_SLASH = ("//",)

COMMENT_PREFIXES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
	"Python": _HASH,
	"Ruby": _HASH,
	"Perl": _HASH,
	"R": _HASH,
	"Shell": _HASH,
	"YAML": _HASH,
	"TOML": _HASH,
	"Dockerfile": _HASH,
	"Makefile": _HASH,
	"CMake": _HASH,
	"Go": _SLASH,
	"JavaScript": _SLASH,
	"TypeScript": _SLASH,
	"Java": _SLASH,
	"C": _SLASH,
	"C++": _SLASH,
	"C/C++ Header": _SLASH,
	"C++ Header": _SLASH,
	"C#": _SLASH,
	"Swift": _SLASH,
	"Kotlin": _SLASH,
	"Rust": _SLASH,
	"Scala": _SLASH,
	"Objective-C": _SLASH,
	"Dart": _SLASH,
	"Protocol Buffers": _SLASH,
	"SCSS": _SLASH,
	"Less": _SLASH,
	"PHP": ("//", "#"),
	"GraphQL": _HASH,
	"Lua": ("--",),
	"SQL": ("--",),
	"LaTeX": ("%",),
	"INI": (";", "#"),
})


def detect_language(extension: str, filename: str) -> str:
	if filename in SPECIAL_FILES:
		return SPECIAL_FILES[filename]

	language = EXTENSION_LANGUAGE.get(extension.lower())
	if language is not None:
		return language

	if filename.startswith(".") and not extension:
		return "Config"
	if not extension:
		return "No Extension"
	return "Other"


def is_text_file(extension: str) -> bool:
	return extension.lower() in TEXT_EXTENSIONS


def comment_prefixes(language: str) -> Tuple[str, ...]:
	return COMMENT_PREFIXES.get(language, ())
