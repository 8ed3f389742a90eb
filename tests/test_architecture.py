"""Architectural boundary tests using pytest-archon.

These tests verify that the layers only depend inwards:
- Domain layer has no dependencies on application or adapters
- Application logic only depends on the domain
- Adapters depend on the domain and on each other, never on application logic
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import anything outside the domain models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("fleet_sync.domain.models*")
        .should_not_import("fleet_sync.adapters*")
        .should_not_import("fleet_sync.application*")
        .should_not_import("fleet_sync.domain.contracts*")
        .may_import("fleet_sync.domain.models*")
        .check("fleet_sync")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("fleet_sync.domain.contracts*")
        .should_not_import("fleet_sync.adapters*")
        .should_not_import("fleet_sync.application*")
        .may_import("fleet_sync.domain.contracts*")
        .may_import("fleet_sync.domain.models*")
        .check("fleet_sync")
    )


def test_application_doesnt_import_adapters() -> None:
    """Application logic should not depend on adapters (infrastructure layer)."""
    (
        archrule("application", comment="Application logic should not depend on adapters")
        .match("fleet_sync.application*")
        .should_not_import("fleet_sync.adapters*")
        .should_not_import("fleet_sync.main")
        .should_not_import("fleet_sync.cli")
        .may_import("fleet_sync.domain*")
        .may_import("fleet_sync.application*")
        .check("fleet_sync")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application logic (to avoid cycles)."""
    (
        archrule("adapters independence", comment="Adapters should not depend on application")
        .match("fleet_sync.adapters*")
        .should_not_import("fleet_sync.application*")
        .may_import("fleet_sync.domain*")
        .may_import("fleet_sync.adapters*")
        .check("fleet_sync", only_direct_imports=True)
    )
