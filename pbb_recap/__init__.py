"""
PBB-P2 arrears recap: extract yearly arrears (Kurang Bayar) from scanned tax
documents with a multimodal model, validate them and export them as CSV.

Modules:
  llm/          - typed LiteLLM client, error taxonomy, retry policy
  extraction/   - prompt, response schema, normalization into TaxRecord
  records/      - TaxRecord model, in-memory store, summary, CSV export
  orchestrator/ - sequential batch upload processing, CLI
  api/          - Flask blueprint and app factory
"""

__version__ = "1.0.0"
