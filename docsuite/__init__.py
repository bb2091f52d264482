"""
DocSuite — calculation core for Indian business documents.

Pure calculators live under docsuite.documents.<document_type>.calculator
(income_tax uses tax_engine); docsuite.main exposes them over HTTP.
"""
