"""
Static and demo data for the Ledger UI.

This package contains fixture data used by DemoDocumentService for
development, testing, and demonstrations without a running backend.

Modules:
- demo_documents: Tax documents and an issuer record in wire format
"""
