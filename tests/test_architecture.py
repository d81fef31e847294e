"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters don't depend on application services; main.py wires both together
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import anything outside the models package."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("departure_board.domain.models*")
        .should_not_import("departure_board.adapters*")
        .should_not_import("departure_board.application*")
        .should_not_import("departure_board.domain.contracts*")
        .should_not_import("departure_board.domain.ports*")
        .may_import("departure_board.domain.models*")
        .check("departure_board")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("departure_board.domain.ports*")
        .should_not_import("departure_board.adapters*")
        .should_not_import("departure_board.application*")
        .may_import("departure_board.domain*")
        .check("departure_board")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("departure_board.domain.contracts*")
        .should_not_import("departure_board.adapters*")
        .should_not_import("departure_board.application*")
        .may_import("departure_board.domain*")
        .check("departure_board")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("departure_board.application*")
        .should_not_import("departure_board.adapters*")
        .may_import("departure_board.domain*")
        .may_import("departure_board.application*")
        .check("departure_board")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("departure_board.adapters*")
        .should_not_import("departure_board.application*")
        .may_import("departure_board.domain*")
        .may_import("departure_board.adapters*")
        .check("departure_board", only_direct_imports=True)
    )


def test_views_dont_import_pyview_app() -> None:
    """Views should not import the pyview_app module to avoid cycles."""
    (
        archrule("views independence", comment="Views should not import pyview_app")
        .match("departure_board.adapters.web.views*")
        .should_not_import("departure_board.adapters.web.pyview_app")
        .check("departure_board", only_direct_imports=True)
    )
