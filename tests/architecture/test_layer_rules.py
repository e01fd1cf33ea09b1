"""
Layer Rules.

Permanent tests enforcing dependency direction between layers:
- Domain must not access Rules, Application or Infrastructure
- Rules must not access Application or Infrastructure
- Application must not access Infrastructure

These rules use PyTestArch's LayerRule API for declarative enforcement.
"""

import pytest
from pytestarch import LayerRule


def _forbid(layers, source: str, target: str) -> LayerRule:
    return (
        LayerRule()
        .based_on(layers)
        .layers_that()
        .are_named(source)
        .should_not()
        .access_layers_that()
        .are_named(target)
    )


class TestLayerRules:
    """Permanent architecture rules enforcing the layering."""

    @pytest.mark.parametrize("target", ["rules", "application", "infrastructure"])
    def test_domain_is_pure(self, evaluable, layers, target):
        """Domain holds data and ports only."""
        _forbid(layers, "domain", target).assert_applies(evaluable)

    @pytest.mark.parametrize("target", ["application", "infrastructure"])
    def test_rules_depend_only_on_domain(self, evaluable, layers, target):
        """Rules are pure functions of domain records."""
        _forbid(layers, "rules", target).assert_applies(evaluable)

    def test_application_does_not_access_infrastructure(self, evaluable, layers):
        """The engine works on a built Policy, not on documents or files."""
        _forbid(layers, "application", "infrastructure").assert_applies(evaluable)
