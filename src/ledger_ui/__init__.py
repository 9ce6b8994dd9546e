"""
Ledger UI: A Reflex application for tax invoice receipts.

This package provides the document list (search, paging, cancel and
delete) and the printable document view on top of the accounting
backend's HTTP API.

Subpackages:
- controllers: Framework-free list and print view logic
- components: Reflex UI components
- models: Domain records, filter criteria and Reflex view models
- services: Backend access layer (HTTP and demo implementations)
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
