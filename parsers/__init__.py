"""
Parsers Package

- form_data: report form fields, raw form state and numeric parsing
"""
