"""
Services package for the asset extraction backend.

Contains:
- ai: OpenAI integration for asset extraction from PDF documents
"""

from .ai import AIService, get_ai_service

__all__ = ["AIService", "get_ai_service"]
