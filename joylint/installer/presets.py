"""Dependency sets installed by the lint bootstrapper."""

from __future__ import annotations

from joylint.installer.models import DependencyDescriptor as Dep

LINT_TOOLS: list[Dep] = [
    Dep("eslint", "^8.57.0"),
    Dep("prettier"),
    Dep("eslint-config-prettier"),
    Dep("eslint-plugin-prettier"),
    Dep("eslint-plugin-import"),
    Dep("@typescript-eslint/parser"),
    Dep("@typescript-eslint/eslint-plugin"),
]

REACT_DEPS: list[Dep] = [
    Dep("eslint-plugin-react"),
    Dep("eslint-plugin-react-hooks"),
]

# eslint-plugin-vue 7.x is the last line supporting Vue 2 templates
VUE2_DEPS: list[Dep] = [
    Dep("eslint-plugin-vue", "^7.20.0"),
    Dep("vue-eslint-parser", "^7.11.0"),
]

VUE3_DEPS: list[Dep] = [
    Dep("eslint-plugin-vue"),
    Dep("vue-eslint-parser"),
]

# `husky install` / `husky add` were removed in husky 9
HUSKY_DEPS: list[Dep] = [
    Dep("husky", "^8.0.3"),
    Dep("lint-staged"),
]

FRAMEWORK_DEPS: dict[str, list[Dep]] = {
    "react": REACT_DEPS,
    "vue2": VUE2_DEPS,
    "vue3": VUE3_DEPS,
}

FRAMEWORKS: list[str] = [*FRAMEWORK_DEPS, "none"]


def lint_dependencies(framework: str | None) -> list[Dep]:
    """Base lint tools plus the extras for *framework* (unknown -> base only)."""
    extras = FRAMEWORK_DEPS.get((framework or "").strip().lower(), [])
    return [*LINT_TOOLS, *extras]
