"""
HTTP API

Responsibilities:
- Forwards extracted resume text to the language-model provider with a fixed system prompt
- Extracts text from uploaded PDFs
- Maps the shared error taxonomy onto HTTP statuses with {"error": ...} bodies

Owns: Request validation and the provider credential
Never: Keeps state between requests
"""
