"""레포지토리 패키지: 데이터베이스 쿼리 계층.

Repository package: Database query layer.
Each repository extends BaseRepository for generic CRUD and adds domain-specific queries.
"""
