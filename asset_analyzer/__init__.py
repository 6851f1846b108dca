"""
Property Asset Analyzer.

Extracts asset records (computers, monitors, printers) from PDF documents
using an AI model, and shapes them for a sortable table and summary chart.
"""

__version__ = "1.0.0"
