"""
rendevu - Cal.com MCP tools, webhook relay and AI meeting assistant.

Subpackages:
- rendevu.tools: MCP tools over the Cal.com v2 API
- rendevu.llm: generative-text providers
- rendevu.webhook: lifecycle event dispatch
"""

__version__ = "0.1.0"
