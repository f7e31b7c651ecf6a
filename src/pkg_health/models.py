"""Domain models for pkg-health. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

# ─── Enumerations ─────────────────────────────────────────────


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    HINT = "hint"

    @property
    def rank(self) -> int:
        """Sort rank (lower = more severe)."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK: dict[Severity, int] = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
    Severity.HINT: 2,
}


class SuggestionCode(StrEnum):
    CHANGELOG_MISSING = "changelog.missing"
    README_MISSING = "readme.missing"
    EXAMPLE_MISSING = "example.missing"
    ANALYSIS_OPTIONS_RENAME_REQUIRED = "analysisOptions.renameRequired"
    ANALYSIS_OPTIONS_WEAK_MODE = "analysisOptions.weakMode"
    ANALYSIS_OPTIONS_PARSE_FAILED = "analysisOptions.parseFailed"
    PACKAGE_VERSION_PRE_V1 = "packageVersion.preV1"
    PACKAGE_VERSION_PRE_RELEASE = "packageVersion.preRelease"
    PACKAGE_VERSION_OLD = "packageVersion.old"
    PACKAGE_VERSION_OBSOLETE = "packageVersion.obsolete"
    ANALYSIS_ISSUES = "analysis.issues"
    ANALYSIS_HINTS = "analysis.hints"
    PUBSPEC_HOMEPAGE_IS_NOT_HELPFUL = "pubspec.homepage.isNotHelpful"
    PUBSPEC_HOMEPAGE_DOES_NOT_EXISTS = "pubspec.homepage.doesNotExists"
    PUBSPEC_DOCUMENTATION_IS_NOT_HELPFUL = "pubspec.documentation.isNotHelpful"
    PUBSPEC_DOCUMENTATION_DOES_NOT_EXISTS = "pubspec.documentation.doesNotExists"
    PUBSPEC_SDK_MISSING = "pubspec.sdk.missing"
    PUBSPEC_DESCRIPTION_TOO_SHORT = "pubspec.description.tooShort"
    PUBSPEC_DESCRIPTION_TOO_LONG = "pubspec.description.tooLong"
    PUBSPEC_DEPENDENCIES_UNCONSTRAINED = "pubspec.dependencies.unconstrained"


class UrlStatus(StrEnum):
    VALID = "valid"
    MISSING = "missing"
    INVALID = "invalid"
    INTERNAL = "internal"


# ─── Suggestion Models ───────────────────────────────────────

MAX_FRACTION = 10_000


@dataclass(frozen=True, slots=True)
class Penalty:
    """A score deduction attached to a suggestion.

    ``amount`` is in points out of 100 and is subtracted from the running
    score. ``fraction`` is in parts-per-10000 and multiplies the running
    score by ``1 - fraction / 10000``.
    """

    amount: int = 0
    fraction: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", max(0, int(self.amount)))
        object.__setattr__(self, "fraction", min(MAX_FRACTION, max(0, int(self.fraction))))

    @property
    def is_empty(self) -> bool:
        return self.amount == 0 and self.fraction == 0


@dataclass(frozen=True, slots=True)
class Suggestion:
    """A single actionable finding about a package."""

    code: SuggestionCode | str
    severity: Severity
    title: str
    description: str
    file: str | None = None
    penalty: Penalty | None = None

    @classmethod
    def error(
        cls,
        code: SuggestionCode | str,
        title: str,
        description: str,
        *,
        file: str | None = None,
        penalty: Penalty | None = None,
    ) -> Suggestion:
        return cls(code, Severity.ERROR, title, description, file=file, penalty=penalty)

    @classmethod
    def warning(
        cls,
        code: SuggestionCode | str,
        title: str,
        description: str,
        *,
        file: str | None = None,
        penalty: Penalty | None = None,
    ) -> Suggestion:
        return cls(code, Severity.WARNING, title, description, file=file, penalty=penalty)

    @classmethod
    def hint(
        cls,
        code: SuggestionCode | str,
        title: str,
        description: str,
        *,
        file: str | None = None,
        penalty: Penalty | None = None,
    ) -> Suggestion:
        return cls(code, Severity.HINT, title, description, file=file, penalty=penalty)

    def to_dict(self) -> dict[str, object]:
        result: dict[str, object] = {
            "code": str(self.code),
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
        }
        if self.file is not None:
            result["file"] = self.file
        if self.penalty is not None:
            result["penalty"] = {
                "amount": self.penalty.amount,
                "fraction": self.penalty.fraction,
            }
        return result


# ─── Analysis Models ─────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class AnalysisCounts:
    """Issue counts reported by the external static-analysis run."""

    errors: int = 0
    warnings: int = 0
    hints: int = 0

    def __post_init__(self) -> None:
        for name in ("errors", "warnings", "hints"):
            object.__setattr__(self, name, max(0, int(getattr(self, name))))

    @classmethod
    def from_suggestions(cls, suggestions: Sequence[Suggestion]) -> AnalysisCounts:
        errors = warnings = hints = 0
        for suggestion in suggestions:
            match suggestion.severity:
                case Severity.ERROR:
                    errors += 1
                case Severity.WARNING:
                    warnings += 1
                case Severity.HINT:
                    hints += 1
        return cls(errors=errors, warnings=warnings, hints=hints)


@dataclass(frozen=True, slots=True)
class VersionInfo:
    """A parsed semantic version."""

    major: int
    minor: int
    patch: int
    pre_release: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @property
    def is_experimental(self) -> bool:
        return self.major == 0

    @property
    def is_pre_release(self) -> bool:
        return bool(self.pre_release)


@dataclass(frozen=True, slots=True)
class ProbeOptions:
    """How a file name list is matched against the package tree."""

    case_sensitive: bool
    min_length: int


@dataclass(frozen=True, slots=True)
class LintConfigResult:
    """Outcome of inspecting a lint configuration file."""

    strong_mode_enabled: bool = False
    suggestions: tuple[Suggestion, ...] = ()


# ─── Metadata Models ─────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PackageMetadata:
    """The subset of ``pubspec.yaml`` used by the metadata checks."""

    name: str
    version: str
    description: str | None = None
    homepage: str | None = None
    documentation: str | None = None
    sdk_constraint: str | None = None
    dependencies: dict[str, object] = field(default_factory=dict)

    @property
    def has_sdk_constraint(self) -> bool:
        return bool(self.sdk_constraint and self.sdk_constraint.strip())

    @property
    def unconstrained_dependencies(self) -> list[str]:
        """Names of hosted dependencies without a version range."""
        names: list[str] = []
        for name, spec in self.dependencies.items():
            if spec is None or (isinstance(spec, str) and spec.strip() in ("", "any")):
                names.append(name)
            elif isinstance(spec, dict) and "version" in spec:
                value = spec.get("version")
                if value is None or str(value).strip() in ("", "any"):
                    names.append(name)
        return sorted(names)


# ─── Maintenance Result ──────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Maintenance:
    """Maintenance signals and suggestions for one analyzed package version."""

    missing_changelog: bool
    missing_readme: bool
    missing_example: bool
    missing_analysis_options: bool
    old_analysis_options: bool
    strong_mode_enabled: bool
    is_experimental_version: bool
    is_pre_release_version: bool
    error_count: int = 0
    warning_count: int = 0
    hint_count: int = 0
    suggestions: tuple[Suggestion, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "missing_changelog": self.missing_changelog,
            "missing_readme": self.missing_readme,
            "missing_example": self.missing_example,
            "missing_analysis_options": self.missing_analysis_options,
            "old_analysis_options": self.old_analysis_options,
            "strong_mode_enabled": self.strong_mode_enabled,
            "is_experimental_version": self.is_experimental_version,
            "is_pre_release_version": self.is_pre_release_version,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "hint_count": self.hint_count,
            "suggestions": [s.to_dict() for s in self.suggestions],
        }
