"""Translations module.

Per-language content (title, author, description, keywords) of site
configurations, with cache-first reads and write-path cache invalidation.

Components:
- models: Translation, TranslationRecord, keyword codec
- keys: cache key scheme and TTL
- store: TranslationStore protocol and in-memory store
- validation: content rules
- service: TranslationService
- controllers: FastAPI router
"""
