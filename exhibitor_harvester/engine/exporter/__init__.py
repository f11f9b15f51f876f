"""Exporter SPI and implementations."""

from .base import BaseExporter
from .file_exporter import CsvExporter, JsonExporter, build_exporters

__all__ = ["BaseExporter", "CsvExporter", "JsonExporter", "build_exporters"]
