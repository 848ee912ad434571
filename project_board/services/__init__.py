"""서비스 패키지: 비즈니스 로직 계층.

Service package: Business logic layer.
Services validate domain rules and delegate queries to repositories.
They flush but never commit; route handlers own the transaction.
"""
