"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Each retrieval strategy is one repository method; entity repositories extend
BaseRepository, query repositories select straight into DTOs.
"""
