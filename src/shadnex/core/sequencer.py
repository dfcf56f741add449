"""Prompt sequencer — turns a series of answers into a ``ProjectConfig``.

The order of questions is fixed::

    package manager → project name → setup mode → feature questions
    → import alias → Shadcn UI → extras (Prettier, license)

Which of the feature questions are asked is decided by a small state
machine over :class:`~shadnex.core.models.SetupMode`: each mode maps to
an explicit :class:`SetupPlan`, so the ``shadcn ⇒ tailwind`` invariant
holds by construction rather than by later validation.

Every answer is checked immediately: ``None`` (the prompter's signal for
Ctrl+C / Esc) or an empty required answer raises
:class:`~shadnex.exceptions.SetupCancelled`, and nothing else is asked.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from shadnex.core.models import (
    DEFAULT_IMPORT_ALIAS,
    NO_LICENSE,
    RECOMMENDED_FEATURES,
    PackageManager,
    ProjectConfig,
    SetupMode,
)
from shadnex.core.protocols import Prompter
from shadnex.exceptions import InvalidProjectNameError, SetupCancelled

T = TypeVar("T")

EMPTY_NAME_MESSAGE: str = "Project name cannot be empty"

REUSE_NOTICES: tuple[str, ...] = (
    "Reusing previous settings is not yet implemented.",
    "Falling back to customization mode...",
)

FEATURE_QUESTIONS: tuple[tuple[str, str], ...] = (
    ("typescript", "Would you like to use TypeScript?"),
    ("eslint", "Would you like to use ESLint?"),
    ("tailwind", "Would you like to use Tailwind CSS?"),
    ("src_dir", "Would you like your code inside a `src/` directory?"),
    ("app_router", "Would you like to use App Router? (recommended)"),
    ("turbopack", "Would you like to use Turbopack? (recommended)"),
    ("import_alias", "Would you like to customize the import alias (`@/*` by default)?"),
)
"""``(field, question)`` pairs asked, in order, by the customize plan."""

PACKAGE_MANAGER_CHOICES: tuple[tuple[str, PackageManager], ...] = (
    ("npm       npx create-next-app", PackageManager.NPM),
    ("pnpm      pnpm dlx create-next-app", PackageManager.PNPM),
    ("yarn      yarn create next-app", PackageManager.YARN),
    ("bun       bun create next-app", PackageManager.BUN),
)

SETUP_MODE_CHOICES: tuple[tuple[str, SetupMode], ...] = (
    ("Yes, use recommended defaults", SetupMode.DEFAULTS),
    ("No, reuse previous settings", SetupMode.REUSE),
    ("No, customize settings", SetupMode.CUSTOMIZE),
)


# ---------------------------------------------------------------------------
# Setup-mode state machine
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SetupPlan:
    """What a setup mode asks, and what it fixes without asking."""

    ask_features: bool
    """Run the :data:`FEATURE_QUESTIONS` batch plus alias / Shadcn follow-ups."""

    preset: Mapping[str, bool] = field(default_factory=dict)
    """Feature values applied without asking."""

    notices: tuple[str, ...] = ()
    """Messages shown before the plan runs."""


SETUP_PLANS: MappingProxyType[SetupMode, SetupPlan] = MappingProxyType(
    {
        SetupMode.DEFAULTS: SetupPlan(ask_features=False, preset=RECOMMENDED_FEATURES),
        # Persisted settings do not exist yet: reuse degrades to customize.
        SetupMode.REUSE: SetupPlan(ask_features=True, notices=REUSE_NOTICES),
        SetupMode.CUSTOMIZE: SetupPlan(ask_features=True),
    }
)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def validate_project_name(value: str) -> bool | str:
    """Prompt validator: ``True`` or the inline error message."""
    return True if value.strip() else EMPTY_NAME_MESSAGE


def normalize_project_name(value: str) -> str:
    """Trim a name supplied outside the prompt, rejecting blank input."""
    trimmed = value.strip()
    if not trimmed:
        raise InvalidProjectNameError(
            f"{EMPTY_NAME_MESSAGE}.",
            hint="Pass a non-blank name, or omit it to be asked interactively.",
        )
    return trimmed


def _require(answer: T | None) -> T:
    if answer is None:
        raise SetupCancelled()
    if isinstance(answer, str) and not answer.strip():
        raise SetupCancelled()
    return answer


# ---------------------------------------------------------------------------
# Sequencer
# ---------------------------------------------------------------------------

class SetupSequencer:
    """Drive a :class:`Prompter` through the scaffolding questions.

    Parameters
    ----------
    prompter:
        Any object satisfying the :class:`Prompter` protocol.
    licenses:
        License identifiers offered in the license question.  When empty
        the question is skipped.
    default_holder:
        Pre-filled answer for the copyright-holder question.
    """

    def __init__(
        self,
        prompter: Prompter,
        *,
        licenses: Sequence[str] = (),
        default_holder: str = "",
    ) -> None:
        self._prompter = prompter
        self._licenses = tuple(licenses)
        self._default_holder = default_holder

    def collect(
        self,
        *,
        project_name: str | None = None,
        package_manager: PackageManager | None = None,
    ) -> ProjectConfig:
        """Ask every applicable question and return the assembled config.

        *project_name* and *package_manager* pre-answer the matching
        questions (e.g. from command-line arguments).

        Raises
        ------
        SetupCancelled
            As soon as any question is aborted.
        InvalidProjectNameError
            If a pre-supplied *project_name* is blank.
        """
        if package_manager is None:
            package_manager = self.ask_package_manager()
        if project_name is None:
            name = self.ask_project_name()
        else:
            name = normalize_project_name(project_name)

        mode = self.ask_setup_mode()
        features = self.resolve_features(mode)

        prettier = _require(self._prompter.confirm("Add Prettier for code formatting?", default=False))
        license_id, holder = self.ask_license()

        return ProjectConfig(
            project_name=name,
            package_manager=package_manager,
            prettier=prettier,
            license=license_id,
            license_holder=holder,
            **features,
        )

    # ------------------------------------------------------------------
    # Individual steps
    # ------------------------------------------------------------------

    def ask_package_manager(self) -> PackageManager:
        return _require(
            self._prompter.select(
                "Which package manager would you like to use?",
                PACKAGE_MANAGER_CHOICES,
                default=PackageManager.NPM,
            )
        )

    def ask_project_name(self) -> str:
        answer = _require(
            self._prompter.text(
                "What is your project named?",
                validate=validate_project_name,
            )
        )
        return answer.strip()

    def ask_setup_mode(self) -> SetupMode:
        return _require(
            self._prompter.select(
                "Would you like to use the recommended Next.js defaults?",
                SETUP_MODE_CHOICES,
                default=SetupMode.DEFAULTS,
            )
        )

    def resolve_features(self, mode: SetupMode) -> dict[str, object]:
        """Run the plan for *mode* and return ``ProjectConfig`` keyword values."""
        plan = SETUP_PLANS[mode]
        for message in plan.notices:
            self._prompter.notice(message)

        features: dict[str, object] = dict(plan.preset)
        if not plan.ask_features:
            return features

        for name, question in FEATURE_QUESTIONS:
            features[name] = _require(
                self._prompter.confirm(question, default=RECOMMENDED_FEATURES[name])
            )

        if features["import_alias"]:
            features["alias"] = _require(
                self._prompter.text(
                    "What import alias would you like configured?",
                    default=DEFAULT_IMPORT_ALIAS,
                )
            ).strip()

        features["shadcn"] = False
        if features["tailwind"]:
            features["shadcn"] = _require(self._prompter.confirm("Install Shadcn UI?", default=True))
        return features

    def ask_license(self) -> tuple[str, str | None]:
        """Return ``(license_id, holder)``; ``("none", None)`` when skipped."""
        if not self._licenses:
            return NO_LICENSE, None
        choices = [("None", NO_LICENSE), *((lic, lic) for lic in self._licenses)]
        license_id = _require(
            self._prompter.select("Choose a license:", choices, default=NO_LICENSE)
        )
        if license_id == NO_LICENSE:
            return NO_LICENSE, None
        holder = _require(
            self._prompter.text("Copyright holder:", default=self._default_holder)
        ).strip()
        return license_id, holder
