"""서비스 패키지 — 조회 로직 계층.

Service package — Read logic layer.
Services pick a retrieval strategy, call repositories, and project the
resolved records into response DTOs.
"""
