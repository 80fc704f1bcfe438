from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st

from web_standard_lint import conflict, templates
from web_standard_lint.constants import PROJECT_TYPE_VALUES
from web_standard_lint.models import InitOptions
from web_standard_lint.prompts import StepCounter
from web_standard_lint.services import InitLintDependencies, InitLintService
from web_standard_lint.services.init_lint import stylelint_default

KEY_CHARS = string.ascii_lowercase + "."
LINT_PREFIXES = {"eslint", "stylelint", "markdownlint", "prettier", "tslint", "babel"}

project_types = st.sampled_from(sorted(PROJECT_TYPE_VALUES))
unknown_types = st.text(alphabet=string.ascii_lowercase + "/", max_size=20).filter(
    lambda value: value not in PROJECT_TYPE_VALUES
)
keys = st.text(alphabet=KEY_CHARS, min_size=1, max_size=12)
scalars = st.one_of(st.booleans(), st.integers(), st.text(max_size=8))


class _NoPrompts:
    def select(self, text, choices, default=None):
        raise AssertionError(f"unexpected prompt: {text}")

    def confirm(self, text, default=False):
        raise AssertionError(f"unexpected prompt: {text}")


class _FirstChoice:
    def __init__(self) -> None:
        self.selects = 0

    def select(self, text, choices, default=None):
        self.selects += 1
        return choices[0][1]

    def confirm(self, text, default=False):
        return default


@given(
    eslint_type=project_types,
    enable_stylelint=st.booleans(),
    enable_markdownlint=st.booleans(),
    enable_prettier=st.booleans(),
)
def test_fully_supplied_options_resolve_verbatim_without_prompts(
    eslint_type: str,
    enable_stylelint: bool,
    enable_markdownlint: bool,
    enable_prettier: bool,
) -> None:
    service = InitLintService(InitLintDependencies(prompter=_NoPrompts()))
    options = InitOptions(
        eslint_type=eslint_type,
        enable_stylelint=enable_stylelint,
        enable_markdownlint=enable_markdownlint,
        enable_prettier=enable_prettier,
    )
    steps = StepCounter()

    config = service.resolve_config(options, steps)

    assert config.enable_eslint is True
    assert config.eslint_type == eslint_type
    assert config.enable_stylelint is enable_stylelint
    assert config.enable_markdownlint is enable_markdownlint
    assert config.enable_prettier is enable_prettier
    assert steps.current == 0


@given(eslint_type=unknown_types)
def test_unknown_project_types_are_prompted_for(eslint_type: str) -> None:
    prompter = _FirstChoice()
    service = InitLintService(InitLintDependencies(prompter=prompter))
    options = InitOptions(
        eslint_type=eslint_type,
        enable_stylelint=True,
        enable_markdownlint=True,
        enable_prettier=True,
    )

    config = service.resolve_config(options, StepCounter())

    assert prompter.selects == 1
    assert config.eslint_type == "index"


@given(eslint_type=project_types)
def test_stylelint_defaults_off_only_for_node_projects(eslint_type: str) -> None:
    assert stylelint_default(eslint_type) is ("node" not in eslint_type)


@given(
    existing=st.dictionaries(keys, scalars, max_size=6),
    generated=st.dictionaries(keys, scalars, max_size=6),
)
def test_merged_editor_settings_keep_existing_values(
    existing: dict[str, object], generated: dict[str, object]
) -> None:
    merged = templates.merge_json_settings(existing, generated)

    for key, value in existing.items():
        assert merged[key] == value
    assert set(merged) == set(existing) | set(generated)


@given(name=keys.map(lambda value: value.replace(".", "-")))
def test_bundled_package_never_conflicts(name: str) -> None:
    assert not conflict.is_conflicting_package("web-standard-lint")
    if conflict.is_conflicting_package(name):
        assert name.split("-")[0] in LINT_PREFIXES
