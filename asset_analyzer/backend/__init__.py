"""
Asset extraction backend.

A FastAPI service that forwards uploaded PDF documents to an AI model
(OpenAI) and returns the extracted asset records as JSON.
"""
