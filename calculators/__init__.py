"""
Calculators Package

- tax_returns: VAT / Self Assessment / P&L / Balance Sheet payload models
- payload_builder: form text -> payloads
- submission_store: persisted submission history

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['tax_returns', 'payload_builder', 'submission_store']
