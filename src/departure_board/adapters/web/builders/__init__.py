"""Builders for template data."""

from departure_board.adapters.web.builders.template_data_builder import TemplateDataBuilder

__all__ = ["TemplateDataBuilder"]
