"""Provider adapters: build LiteLLM kwargs and content parts for Gemini."""
from pbb_recap.llm.providers.gemini import gemini_kwargs, inline_document_part

__all__ = ["gemini_kwargs", "inline_document_part"]
