"""Pydantic 스키마 패키지: API request/response models."""
